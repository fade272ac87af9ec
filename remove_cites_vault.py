"""Script wrapper for cleaning a whole vault.

Use the packaged CLI instead:
    python -m cite_remover.cli vault --vault-dir notes
or install the package and run `cite-remover vault --vault-dir notes`.
"""

from cite_remover.cli import vault_cli


if __name__ == "__main__":
    vault_cli()
