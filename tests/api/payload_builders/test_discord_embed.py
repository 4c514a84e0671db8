"""Testes do EmbedBuilder."""

from __future__ import annotations

from datetime import UTC, datetime

from api.payload_builders.discord import EmbedBuilder
from api.payload_builders.discord.embed import ZERO_WIDTH_SPACE


class TestEmbedFields:
    """Fields do embed."""

    def test_add_field_omits_unset_inline(self) -> None:
        embed = EmbedBuilder().add_field("Nome", "Valor").to_json()
        assert embed == {"fields": [{"name": "Nome", "value": "Valor"}]}

    def test_add_fields_preserves_order(self) -> None:
        builder = EmbedBuilder().add_fields(
            {"name": "A", "value": "1", "inline": True},
            {"name": "B", "value": "2"},
        )
        assert builder.get_fields() == [
            {"name": "A", "value": "1", "inline": True},
            {"name": "B", "value": "2"},
        ]

    def test_add_blank_field(self) -> None:
        field = EmbedBuilder().add_blank_field(inline=False).get_field(0)
        assert field == {"name": ZERO_WIDTH_SPACE, "value": ZERO_WIDTH_SPACE, "inline": False}

    def test_get_field_out_of_range(self) -> None:
        builder = EmbedBuilder().add_field("A", "1")
        assert builder.get_field(1) is None
        assert builder.get_field(-1) is None
        assert EmbedBuilder().get_fields() == []


class TestEmbedSetters:
    """Setters, getters e removers."""

    def test_full_embed(self) -> None:
        embed = (
            EmbedBuilder()
            .set_title("Relatório")
            .set_url("https://example.com")
            .set_color(0x5865F2)
            .set_author("Bot", icon_url="https://example.com/a.png")
            .set_footer("rodapé")
            .set_image("https://example.com/i.png")
            .set_thumbnail("https://example.com/t.png")
            .to_json()
        )
        assert embed == {
            "title": "Relatório",
            "url": "https://example.com",
            "color": 0x5865F2,
            "author": {"name": "Bot", "iconURL": "https://example.com/a.png"},
            "footer": {"text": "rodapé"},
            "image": {"url": "https://example.com/i.png"},
            "thumbnail": {"url": "https://example.com/t.png"},
        }

    def test_set_description_joins_with_line_feed(self) -> None:
        builder = EmbedBuilder().set_description("linha 1", ["linha 2", "linha 3"], "linha 4")
        assert builder.get_description() == "linha 1\nlinha 2\nlinha 3\nlinha 4"

    def test_set_timestamp_from_datetime(self) -> None:
        moment = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
        builder = EmbedBuilder().set_timestamp(moment)
        assert builder.get_timestamp() == "2024-05-01T12:30:00+00:00"
        assert builder.get_timestamp_date() == moment

    def test_set_timestamp_now(self) -> None:
        before = datetime.now(UTC)
        stamp = EmbedBuilder().set_timestamp("now").get_timestamp_date()
        assert stamp is not None
        assert stamp >= before

    def test_set_timestamp_keeps_string(self) -> None:
        builder = EmbedBuilder().set_timestamp("2024-01-01T00:00:00+00:00")
        assert builder.get_timestamp() == "2024-01-01T00:00:00+00:00"

    def test_timestamp_date_absent(self) -> None:
        assert EmbedBuilder().get_timestamp_date() is None

    def test_removers(self) -> None:
        builder = (
            EmbedBuilder()
            .set_title("T")
            .set_color(1)
            .set_url("https://x.y")
            .remove_title()
            .remove_color()
            .remove_url()
            .remove_footer()
        )
        assert builder.get_title() is None
        assert builder.get_color() is None
        assert builder.to_json() == {}


class TestEmbedSerialization:
    """to_json e load_from_json."""

    def test_to_json_array(self) -> None:
        assert EmbedBuilder().set_title("T").to_json(array=True) == [{"title": "T"}]

    def test_load_from_json_single(self) -> None:
        source = {"title": "T", "fields": [{"name": "A", "value": "1"}]}
        builder = EmbedBuilder.load_from_json(source)
        assert isinstance(builder, EmbedBuilder)
        builder.add_field("B", "2")
        # O dict de origem não é alterado
        assert len(source["fields"]) == 1
        assert len(builder.get_fields()) == 2

    def test_load_from_json_list(self) -> None:
        builders = EmbedBuilder.load_from_json([{"title": "A"}, {"title": "B"}])
        assert isinstance(builders, list)
        assert [b.get_title() for b in builders] == ["A", "B"]

    def test_load_from_json_list_force_singular(self) -> None:
        builder = EmbedBuilder.load_from_json([{"title": "A"}, {"title": "B"}], force_singular=True)
        assert isinstance(builder, EmbedBuilder)
        assert builder.get_title() == "A"

    def test_load_from_empty_list_force_singular_returns_none(self) -> None:
        assert EmbedBuilder.load_from_json([], force_singular=True) is None
        assert EmbedBuilder.load_from_json([]) == []

    def test_to_json_does_not_share_nested_records(self) -> None:
        """Alterar o payload retornado não altera o builder."""
        builder = EmbedBuilder().add_field("n", "v").set_author("autor").set_image("https://x.y/i.png")
        payload = builder.to_json()
        payload["fields"][0]["name"] = "alterado"
        payload["author"]["name"] = "alterado"
        payload["image"]["url"] = "alterado"

        assert builder.get_field(0) == {"name": "n", "value": "v"}
        assert builder.get_author() == {"name": "autor"}
        assert builder.get_image() == {"url": "https://x.y/i.png"}

    def test_load_from_json_does_not_share_nested_records(self) -> None:
        source = {"author": {"name": "autor"}, "fields": [{"name": "n", "value": "v"}]}
        builder = EmbedBuilder.load_from_json(source)
        assert isinstance(builder, EmbedBuilder)
        source["author"]["name"] = "alterado"
        source["fields"][0]["name"] = "alterado"
        assert builder.get_author() == {"name": "autor"}
        assert builder.get_field(0) == {"name": "n", "value": "v"}
