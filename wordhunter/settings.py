import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 4
    MAX_RESULTS: int = 50

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed after startup, with their expected types
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_PATH": Path,
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    values = {}
    for name in EDITABLE_FIELDS:
        value = getattr(cfg, name)
        values[name] = str(value) if isinstance(value, Path) else value
    return values


def update_settings(cfg: Settings, **changes) -> dict[str, str]:
    """Apply runtime overrides. Returns a mapping of field name to error message.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, value in changes.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if name == "MIN_WORD_LENGTH" and coerced < 1:
            errors[name] = "must be at least 1"
            continue
        if name == "MAX_RESULTS" and coerced < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
