# Message catalog for everything the command line prints through the bus.
MESSAGES = {
    "cli.app.description": "Parse JavaDoc-style doc comments into a tag-agnostic tree.",
    "cli.option.verbose.help": "Show debug messages.",
    "cli.command.parse.help": "Parse one doc comment file and print its tree.",
    "cli.command.check.help": "Parse every doc comment file and report failures.",
    "file.unreadable": "{path}: could not read file ({error})",
    "parse.error": "{path}: {error}",
    "parse.format.invalid": "Unknown output format {format!r}; expected one of: {choices}.",
    "check.path.missing": "{path}: no such file or directory, skipping.",
    "check.no_files": "No doc comment files found.",
    "check.file.ok": "{path}: ok",
    "check.file.failed": "{path}: {error}",
    "check.summary.success": "Parsed {count} doc comment file(s) without errors.",
    "check.summary.failure": "{failed} of {count} doc comment file(s) failed to parse.",
    "config.error": "Invalid [tool.doctor] configuration: {error}",
}
