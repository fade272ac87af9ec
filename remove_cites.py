"""Script wrapper for cleaning a single file.

Use the packaged CLI instead:
    python -m cite_remover.cli file notes/page.md
or install the package and run `cite-remover file notes/page.md`.
"""

from cite_remover.cli import file_cli


if __name__ == "__main__":
    file_cli()
