"""Dictionary source configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DictionarySourceConfig:
    """A configured external dictionary, tried in ascending priority order."""
    id: str
    name: str
    endpoint: str
    link: str = ""
    is_enabled: bool = True
    priority: int = 100
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> 'DictionarySourceConfig':
        return cls(
            id=data['id'],
            name=data.get('name', data['id']),
            endpoint=data.get('endpoint', ''),
            link=data.get('link', ''),
            is_enabled=bool(data.get('is_enabled', data.get('isEnabled', True))),
            priority=int(data.get('priority', 100)),
            description=data.get('description'),
        )


def enabled_in_priority_order(
    configs: list[DictionarySourceConfig],
) -> list[DictionarySourceConfig]:
    """Enabled sources, lowest priority number first. Ties keep list order."""
    return sorted((c for c in configs if c.is_enabled), key=lambda c: c.priority)
