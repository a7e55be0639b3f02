from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from yakusu.core.divisors import MAX_BUTTON_DISPLAY

CONFIG_ENV_VAR = "YAKUSU_CONFIG"
MESSAGE_KEYS = ("start", "restart", "level_up", "game_over")
# Every placeholder a message template may use.
TEMPLATE_FIELDS = {"level": 0, "number": 0, "count": 0, "score": 0}


@dataclass(frozen=True)
class MessageTemplate:
    title: str
    detail: str

    def render(self, **values: object) -> tuple[str, str]:
        """Fill ``{field}`` placeholders in both title and detail."""
        return self.title.format(**values), self.detail.format(**values)


def _default_messages() -> Dict[str, MessageTemplate]:
    return {
        "start": MessageTemplate("ゲームスタート", "画面中央の数字の約数をすべて選択してください！"),
        "restart": MessageTemplate("ゲーム再開", "レベル1からスタート！頑張ってください！"),
        "level_up": MessageTemplate("正解！", "{level}の約数をすべて見つけました！ 次の数 {number} の約数は{count}個です。"),
        "game_over": MessageTemplate("ゲームオーバー", "レベル {score} でゲームオーバーです。"),
    }


@dataclass(frozen=True)
class GameConfig:
    cap: int = MAX_BUTTON_DISPLAY
    level_up_delay_ms: int = 300
    score_file: Path = field(default_factory=lambda: Path.home() / ".yakusu" / "score.json")
    messages: Dict[str, MessageTemplate] = field(default_factory=_default_messages)

    def message(self, key: str) -> MessageTemplate:
        return self.messages[key]


def default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "config.yaml"


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Load settings from YAML.

    Lookup order: explicit ``path``, then ``$YAKUSU_CONFIG``, then the
    bundled ``data/config.yaml``. Keys missing from the file keep their
    defaults.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else default_config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return GameConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    defaults = GameConfig()
    cap = raw.get("cap", defaults.cap)
    if not isinstance(cap, int) or isinstance(cap, bool) or cap < 1:
        raise ValueError(f"{path.name}: 'cap' must be a positive integer")
    delay = raw.get("level_up_delay_ms", defaults.level_up_delay_ms)
    if not isinstance(delay, int) or isinstance(delay, bool) or delay < 0:
        raise ValueError(f"{path.name}: 'level_up_delay_ms' must be a non-negative integer")

    score_file = defaults.score_file
    if raw.get("score_file") is not None:
        score_file = Path(str(raw["score_file"])).expanduser()

    messages = _default_messages()
    raw_messages = raw.get("messages") or {}
    if not isinstance(raw_messages, dict):
        raise ValueError(f"{path.name}: 'messages' must be a mapping")
    for key, value in raw_messages.items():
        if key not in MESSAGE_KEYS:
            raise ValueError(f"{path.name}: unknown message '{key}'")
        if not isinstance(value, dict):
            raise ValueError(f"{path.name}: message '{key}' must have 'title' and 'detail'")
        title = value.get("title")
        if not title or not isinstance(title, str):
            raise ValueError(f"{path.name}: message '{key}' is missing a 'title'")
        detail = value.get("detail", "")
        template = MessageTemplate(title=title.strip(), detail=str(detail).strip())
        try:
            template.render(**TEMPLATE_FIELDS)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"{path.name}: message '{key}' has an invalid placeholder: {e}") from e
        messages[key] = template

    return GameConfig(
        cap=cap,
        level_up_delay_ms=delay,
        score_file=score_file,
        messages=messages,
    )
