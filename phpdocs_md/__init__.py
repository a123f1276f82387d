"""Generate cross-linked Markdown API documentation from PHPDoc comments."""
