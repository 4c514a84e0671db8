"""Conversão de emojis para o formato parcial aceito pelos componentes."""

from __future__ import annotations

import re
from typing import Any, Literal

_CUSTOM_EMOJI_REGEX = re.compile(r"^<?(a)?:(.*):(\d{15,21})>?$")


def emoji_to_partial(
    emoji: str,
    emoji_type: Literal["default", "custom"] = "custom",
) -> dict[str, Any]:
    """Converte um emoji em partial emoji.

    Args:
        emoji: Caractere unicode (default) ou emoji custom completo
            (ex: "<:paws8:681748079778463796>", "<a:dance:123...>").
        emoji_type: "default" para unicode; "custom" tenta interpretar o
            formato custom e cai para default se não reconhecer.

    Returns:
        Dict {id, name, animated}.

    Exemplo:
        emoji_to_partial("🐾", "default")
        emoji_to_partial("<:paws8:681748079778463796>")
    """
    if emoji_type == "default":
        return {"id": None, "name": emoji, "animated": False}

    match = _CUSTOM_EMOJI_REGEX.match(emoji)
    if match is None or not match.group(2):
        return emoji_to_partial(emoji, "default")

    animated, name, emoji_id = match.groups()
    return {"id": emoji_id, "name": name, "animated": animated == "a"}
