from kong_meta.cli.main import cli

if __name__ == "__main__":
    # Same entry point as the installed kong-meta script, usable from a checkout
    cli()
