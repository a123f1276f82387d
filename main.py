"""Generate Markdown API documentation from PHPDoc comments.

Example:
    python main.py src/ --source vendor/acme/contracts --ignore tests -o docs/api.md
"""

from phpdocs_md.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
