"""Command-line entry point."""

from pidgypost.app import start


def main(argv=None):
    """Run the chat client and return the exit status."""
    try:
        start()
    except Exception as err:
        print(f"Alas, there's been an error: {err}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())