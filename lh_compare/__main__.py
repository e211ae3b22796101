from lh_compare.cli.controller import run

if __name__ == "__main__":
    run()
