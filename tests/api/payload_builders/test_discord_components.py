"""Testes dos componentes individuais: Button, SelectMenu, TextInput, ActionRow e emojis."""

from __future__ import annotations

import pytest

from api.payload_builders.discord import (
    ActionRow,
    Button,
    SelectMenu,
    TextInput,
    build_select_option,
    emoji_to_partial,
)
from api.payload_builders.discord.base import Component, compact_record
from api.validators.discord import ValidationError
from app.constants.discord import (
    ButtonColor,
    ButtonStyle,
    ChannelType,
    ComponentType,
    TextInputStyle,
)


class TestCompactRecord:
    """Testes para compact_record."""

    def test_drops_only_none(self) -> None:
        record = {"a": None, "b": False, "c": 0, "d": "", "e": []}
        assert compact_record(record) == {"b": False, "c": 0, "d": "", "e": []}


class TestComponentBase:
    """Testes da base comum dos componentes."""

    def test_to_json_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Component(ComponentType.BUTTON).to_json()

    def test_disable_enable_are_chainable(self) -> None:
        button = Button(ButtonStyle.PRIMARY, "id")
        assert button.disable() is button
        assert button.disabled is True
        assert button.enable().disabled is False

    def test_repr_includes_type(self) -> None:
        assert "BUTTON" in repr(Button(ButtonStyle.PRIMARY, "id"))


class TestButton:
    """Testes para Button."""

    def test_non_link_style_uses_custom_id(self) -> None:
        button = Button(ButtonStyle.SUCCESS, "confirm").set_label("Confirmar")
        assert button.to_json() == {
            "type": ComponentType.BUTTON,
            "style": ButtonStyle.SUCCESS,
            "label": "Confirmar",
            "disabled": False,
            "customID": "confirm",
        }

    def test_link_style_uses_url(self) -> None:
        button = Button(ButtonStyle.LINK, "https://example.com").set_label("Docs")
        payload = button.to_json()
        assert payload["url"] == "https://example.com"
        assert "customID" not in payload
        assert button.is_link

    def test_button_color_alias(self) -> None:
        """Cores mapeiam para os estilos 1-4."""
        assert Button(ButtonColor.RED, "x").style is ButtonStyle.DANGER
        assert Button(ButtonColor.GREY, "x").style is ButtonStyle.SECONDARY

    def test_type_is_fixed(self) -> None:
        button = Button(ButtonStyle.PRIMARY, "id").set_style(ButtonStyle.DANGER)
        assert button.type is ComponentType.BUTTON
        assert not button.exclusive

    @pytest.mark.parametrize(
        ("initial", "target", "new_style"),
        [
            (ButtonStyle.PRIMARY, "confirm", ButtonStyle.LINK),
            (ButtonStyle.LINK, "https://example.com", ButtonStyle.SUCCESS),
        ],
    )
    def test_style_change_across_link_rejected(
        self, initial: ButtonStyle, target: str, new_style: ButtonStyle
    ) -> None:
        """O alvo fixado na construção sempre aparece no JSON."""
        button = Button(initial, target).set_label("ok")
        with pytest.raises(ValidationError, match="cannot change button style"):
            button.set_style(new_style)
        assert button.style is initial
        payload = button.to_json()
        assert ("url" in payload) != ("customID" in payload)

    def test_create_sets_optional_fields(self) -> None:
        emoji = {"id": None, "name": "🐾", "animated": False}
        button = Button.create(ButtonStyle.PRIMARY, "paw", label="Pata", emoji=emoji, disabled=True)
        payload = button.to_json()
        assert payload["emoji"] == emoji
        assert payload["label"] == "Pata"
        assert payload["disabled"] is True

    def test_wire_form_equals_model_form(self) -> None:
        button = Button.create(ButtonStyle.PRIMARY, "id", label="ok")
        assert button.to_json_raw() == button.to_json()


class TestSelectMenu:
    """Testes para SelectMenu."""

    def test_string_select_is_default_and_exclusive(self) -> None:
        menu = SelectMenu("color")
        assert menu.type is ComponentType.STRING_SELECT
        assert menu.exclusive

    def test_model_form(self) -> None:
        menu = (
            SelectMenu("color")
            .add_option("Azul", "blue", description="Cor fria", default=True)
            .set_placeholder("Escolha uma cor")
            .set_values(1, 2)
        )
        assert menu.to_json() == {
            "type": ComponentType.STRING_SELECT,
            "customID": "color",
            "options": [
                {"label": "Azul", "value": "blue", "description": "Cor fria", "default": True}
            ],
            "placeholder": "Escolha uma cor",
            "minValues": 1,
            "maxValues": 2,
            "disabled": False,
        }

    def test_model_and_wire_differ_only_in_key_names(self) -> None:
        menu = (
            SelectMenu("channels", ComponentType.CHANNEL_SELECT)
            .set_channel_types(ChannelType.GUILD_TEXT, ChannelType.GUILD_VOICE)
            .set_values(0, 3)
        )
        renames = {
            "customID": "custom_id",
            "minValues": "min_values",
            "maxValues": "max_values",
            "channelTypes": "channel_types",
        }
        model = menu.to_json()
        wire = menu.to_json_raw()
        assert {renames.get(key, key): value for key, value in model.items()} == wire
        assert wire["channel_types"] == [ChannelType.GUILD_TEXT, ChannelType.GUILD_VOICE]

    def test_set_values_allows_zero(self) -> None:
        menu = SelectMenu("id").set_values(0)
        assert menu.to_json()["minValues"] == 0
        assert "maxValues" not in menu.to_json()

    def test_set_channel_types_accepts_iterable(self) -> None:
        menu = SelectMenu("id", ComponentType.CHANNEL_SELECT).set_channel_types([0, 2])
        assert menu.channel_types == [ChannelType.GUILD_TEXT, ChannelType.GUILD_VOICE]

    def test_create_replaces_options_and_applies_state(self) -> None:
        menu = SelectMenu.create(
            "id",
            [{"label": "A", "value": "a"}, {"label": "B", "value": "b", "emoji": {"name": "🅱"}}],
            placeholder="Pick",
            max_values=2,
            disabled=True,
        )
        assert [option["value"] for option in menu.options] == ["a", "b"]
        assert menu.options[1]["emoji"] == {"name": "🅱"}
        assert menu.placeholder == "Pick"
        assert menu.min_values is None
        assert menu.max_values == 2
        assert menu.disabled is True

    def test_clear_options(self) -> None:
        menu = SelectMenu("id").add_option("A", "a").clear_options()
        assert menu.options == []

    def test_build_select_option_omits_missing_fields(self) -> None:
        assert build_select_option("A", "a") == {"label": "A", "value": "a"}
        assert build_select_option("A", "a", default=False) == {
            "label": "A",
            "value": "a",
            "default": False,
        }


class TestTextInput:
    """Testes para TextInput."""

    def test_to_json(self) -> None:
        text_input = (
            TextInput(TextInputStyle.PARAGRAPH, "Descrição", "desc")
            .set_length(10, 500)
            .set_placeholder("Conte mais")
            .set_required()
        )
        assert text_input.to_json() == {
            "type": ComponentType.TEXT_INPUT,
            "customID": "desc",
            "style": TextInputStyle.PARAGRAPH,
            "label": "Descrição",
            "minLength": 10,
            "maxLength": 500,
            "required": True,
            "placeholder": "Conte mais",
        }

    def test_is_exclusive_and_wire_equals_model(self) -> None:
        text_input = TextInput(TextInputStyle.SHORT, "Nome", "name").set_value("Ana")
        assert text_input.exclusive
        assert text_input.to_json_raw() == text_input.to_json()

    def test_set_optional(self) -> None:
        text_input = TextInput(TextInputStyle.SHORT, "Nome", "name").set_optional()
        assert text_input.to_json()["required"] is False

    def test_set_length_allows_zero_minimum(self) -> None:
        text_input = TextInput(TextInputStyle.SHORT, "Nome", "name").set_length(0)
        assert text_input.to_json()["minLength"] == 0

    def test_create(self) -> None:
        text_input = TextInput.create(
            TextInputStyle.SHORT, "Nome", "name", placeholder="Seu nome", max_length=40, required=False
        )
        payload = text_input.to_json()
        assert payload["placeholder"] == "Seu nome"
        assert payload["maxLength"] == 40
        assert payload["required"] is False
        assert "minLength" not in payload


class TestActionRow:
    """Testes para ActionRow."""

    def test_serializes_components_in_order(self) -> None:
        a = Button.create(ButtonStyle.PRIMARY, "a", label="A")
        b = Button.create(ButtonStyle.PRIMARY, "b", label="B")
        row = ActionRow().add_components(a, b)
        assert row.to_json() == {
            "type": ComponentType.ACTION_ROW,
            "components": [a.to_json(), b.to_json()],
        }

    def test_components_returns_copy(self) -> None:
        row = ActionRow().add_component(Button(ButtonStyle.PRIMARY, "a"))
        row.components.clear()
        assert row.size == 1

    def test_capacity_and_flags(self) -> None:
        row = ActionRow(capacity=1)
        assert row.is_empty()
        row.add_component(SelectMenu("s"))
        assert row.is_full()
        assert row.has_exclusive()
        assert repr(row) == "ActionRow(size=1, capacity=1)"

    def test_wire_form_uses_component_wire_form(self) -> None:
        row = ActionRow().add_component(SelectMenu("s").set_values(1, 1))
        component = row.to_json_raw()["components"][0]
        assert component["custom_id"] == "s"
        assert component["min_values"] == 1


class TestEmojiToPartial:
    """Testes para emoji_to_partial."""

    def test_default_emoji(self) -> None:
        assert emoji_to_partial("🐾", "default") == {"id": None, "name": "🐾", "animated": False}

    def test_custom_emoji(self) -> None:
        assert emoji_to_partial("<:paws8:681748079778463796>") == {
            "id": "681748079778463796",
            "name": "paws8",
            "animated": False,
        }

    def test_animated_custom_emoji(self) -> None:
        assert emoji_to_partial("<a:dance:681748079778463796>") == {
            "id": "681748079778463796",
            "name": "dance",
            "animated": True,
        }

    def test_unrecognized_custom_falls_back_to_default(self) -> None:
        assert emoji_to_partial("🐾") == {"id": None, "name": "🐾", "animated": False}
