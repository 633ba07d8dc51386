from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class QueryPreset:
    label: str
    expression: str


class QueryCatalog:
    """Ordered, read-only table of preset jq expressions."""

    def __init__(self, presets: list[QueryPreset], default_label: str):
        table = {}
        for preset in presets:
            if preset.label in table:
                raise ValueError(f"Duplicate preset label: {preset.label}")
            table[preset.label] = preset
        if default_label not in table:
            raise ValueError(f"Unknown default preset: {default_label}")
        self._presets = MappingProxyType(table)
        self._default_label = default_label

    def __iter__(self) -> Iterator[QueryPreset]:
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, label: object) -> bool:
        return label in self._presets

    def get(self, label: str) -> QueryPreset:
        return self._presets[label]

    def labels(self) -> list[str]:
        return list(self._presets)

    def items(self) -> list[tuple[str, str]]:
        return [(preset.label, preset.expression) for preset in self._presets.values()]

    def as_dict(self) -> dict[str, str]:
        return dict(self.items())

    @property
    def default(self) -> QueryPreset:
        return self._presets[self._default_label]

    def resolve(self, expression: str | None) -> str:
        """Return the caller's expression, or the default preset when it is blank."""
        if expression and expression.strip():
            return expression
        return self.default.expression


DEFAULT_LABEL = "Context Count"

PRESET_QUERIES = QueryCatalog(
    [
        QueryPreset(
            "Context Count",
            "group_by(.fields.context) | map({context: .[0].fields.context, count: length}) | sort_by(.count) | reverse",
        ),
        QueryPreset(
            "Simple Context Count",
            "group_by(.fields.context) | map({(.[0].fields.context): length}) | add",
        ),
        QueryPreset(
            "Error Levels",
            "group_by(.fields.level) | map({level: .[0].fields.level, count: length})",
        ),
        QueryPreset(
            "Recent Errors",
            '[.[] | select(.fields.level == "error")] | sort_by(.fields.timestamp) | reverse | .[0:5]',
        ),
    ],
    default_label=DEFAULT_LABEL,
)
