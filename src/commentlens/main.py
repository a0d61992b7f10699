"""Main entry point for CommentLens."""

import sys

from commentlens.cli import main as cli_main


def main():
    """Main entry point - delegates to CLI or UI based on arguments."""
    if len(sys.argv) > 1 and sys.argv[1] == "ui":
        from commentlens.cli import launch_ui
        launch_ui()
    else:
        cli_main()


if __name__ == "__main__":
    main()
