import re

from pydantic import BaseModel, ConfigDict

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    version: str
    description: str
    inputs: dict[str, str] = {}
    template: str

    def render(self, **values: object) -> str:
        """Substitute `{{ name }}` placeholders with `values`.

        Raises:
            KeyError: A declared input was not supplied.
        """
        missing = sorted(set(self.inputs) - set(values))
        if missing:
            raise KeyError(
                f"Prompt '{self.name}' v{self.version} missing inputs: {', '.join(missing)}"
            )

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in values:
                return match.group(0)
            return str(values[key])

        return _PLACEHOLDER.sub(_substitute, self.template).strip()
