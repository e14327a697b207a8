from .cli import main

# cli.main() already returns 0 on every path; `python -m lsapps` and the
# installed `lsapps` script share it.
if __name__ == "__main__":
    raise SystemExit(main())
