"""Parse Markdown into template-ready dicts, zero config, zero deps."""

import json

from marklet import Markdown

md = Markdown()
blocks = md("# Hello **World**\n\n- [docs](/pages/docs/index)\n- `code`")
print(json.dumps(blocks, indent=2))
