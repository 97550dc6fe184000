"""Starter .linediff.toml template."""

CONFIG_FILENAME = ".linediff.toml"

DEFAULT_TOML = """\
# linediff configuration
version = "1.0"

[diff]
context_lines = 2         # unchanged lines shown around each change run
merge = "last"            # last | full — how overlapping context windows merge

[output]
format = "text"           # text | terminal | json
color = true
"""
