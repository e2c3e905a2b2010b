"""Starter .gitdelta.toml template."""

DEFAULT_TOML = """\
# gitdelta configuration
# Use it as a pager:  git config --global core.pager gitdelta

[sections]
commit_style = "plain"      # plain | box | underline
file_style = "underline"    # plain | box | underline
hunk_style = "box"          # plain | box | underline

[output]
# width = 120               # pad changed lines to a fixed width
color = "auto"              # auto | always | never

[theme]
theme = "monokai"           # any Pygments style, see: gitdelta list-themes
light = false
# minus_color = "#3f0001"
# minus_emph_color = "#901011"
# plus_color = "#002800"
# plus_emph_color = "#006000"
highlight_removed = false
"""
