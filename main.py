"""
ClipDeck - Main Entry Point

TikTok search proxy and repost planning dashboard backend.
"""

from clipdeck.api.main import serve


def main():
    """Main entry point for running the application."""
    serve()


if __name__ == "__main__":
    main()
