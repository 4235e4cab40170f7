import re

# Opening fence may carry a language tag (js, c++, objective-c) on its own
# line; a first line with punctuation such as "." is code, not a tag
_FENCED_BLOCK = re.compile(
    r"```(?:[A-Za-z][\w+#-]*[ \t]*\r?\n|[ \t]*\r?\n)?(.*?)```", re.DOTALL
)


def first_code_block(text: str) -> str | None:
    """Return the body of the first ``` fenced block in `text`, or None."""
    match = _FENCED_BLOCK.search(text)
    return match.group(1) if match else None
