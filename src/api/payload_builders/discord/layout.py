"""Motor de layout: distribui componentes em action rows.

Regras de posicionamento, aplicadas na ordem de chamada:
- Select menus e text inputs (exclusivos) ocupam uma row sozinhos.
- Botões preenchem a row corrente até row_max e então abrem outra.
- Após um exclusivo o cursor fica sempre numa row vazia.

Rows vazias só desaparecem em finalize(), chamado antes de serializar.
O motor não valida row_max; isso é feito na borda (ComponentBuilder).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.action_row import ActionRow
from app.constants.discord import MAX_ROW_COMPONENTS
from config.logging import get_logger, log_payload_built

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols.payload_builder import SerializableComponent

logger = get_logger(__name__)


class RowLayout:
    """Estado mutável do layout: rows, cursor e row_max.

    Attributes:
        row_max: Capacidade aplicada a rows de componentes não exclusivos.
    """

    def __init__(self, row_max: int = MAX_ROW_COMPONENTS) -> None:
        self.row_max = row_max
        self._rows: list[ActionRow] = []
        self._cursor: int | None = 0

    @property
    def rows(self) -> list[ActionRow]:
        """Cópia das rows atuais (pode conter rows vazias antes de finalize)."""
        return list(self._rows)

    @property
    def cursor(self) -> int | None:
        """Índice da row sendo preenchida; None se o layout finalizado está vazio."""
        return self._cursor

    def _current_row(self) -> ActionRow:
        if self._cursor is None:
            self._cursor = len(self._rows)
        if self._cursor >= len(self._rows):
            self._rows.append(ActionRow(self.row_max))
            self._cursor = len(self._rows) - 1
        current = self._rows[self._cursor]
        # Após finalize() o cursor pode cair numa row com exclusivo
        if current.has_exclusive():
            current = self._append_row()
        return current

    def _append_row(self, component: SerializableComponent | None = None) -> ActionRow:
        row = ActionRow(self.row_max)
        if component is not None:
            row.add_component(component)
        self._rows.append(row)
        self._cursor = len(self._rows) - 1
        logger.debug(
            "Action row opened",
            extra={"row_index": self._cursor, "row_size": row.size},
        )
        return row

    def open_row(self, components: Iterable[SerializableComponent] = ()) -> ActionRow:
        """Abre uma nova row e posiciona nela os componentes informados.

        Os componentes passam pelas mesmas regras de place(): exclusivos
        ganham row própria e botões transbordam ao atingir row_max.

        Returns:
            A row aberta (a primeira, se os componentes ocuparem várias).
        """
        row = self._append_row()
        self.place_many(*components)
        return row

    def place(self, component: SerializableComponent) -> None:
        """Posiciona um componente respeitando exclusividade e row_max."""
        current = self._current_row()

        if component.exclusive:
            if current.is_empty():
                current.add_component(component)
            else:
                self._append_row(component)
            self._append_row()
            return

        if current.size >= self.row_max:
            self._append_row(component)
        else:
            current.add_component(component)

    def place_many(self, *components: SerializableComponent) -> None:
        """Equivalente a chamar place() para cada componente, em ordem."""
        for component in components:
            self.place(component)

    def finalize(self) -> list[ActionRow]:
        """Remove rows vazias preservando a ordem e reposiciona o cursor.

        Returns:
            As rows remanescentes.
        """
        empty_indexes = [index for index, row in enumerate(self._rows) if row.is_empty()]
        for index in reversed(empty_indexes):
            del self._rows[index]

        self._cursor = len(self._rows) - 1 if self._rows else None

        if empty_indexes:
            logger.debug(
                "Empty action rows removed",
                extra={"removed_rows": len(empty_indexes), "remaining_rows": len(self._rows)},
            )
        return list(self._rows)

    def to_json(self) -> list[dict[str, Any]]:
        """Serializa as rows finalizadas na forma model (camelCase)."""
        rows = self.finalize()
        log_payload_built(logger, "action_rows", rows=len(rows), elements=_count(rows))
        return [row.to_json() for row in rows]

    def to_json_raw(self) -> list[dict[str, Any]]:
        """Serializa as rows finalizadas na forma wire (snake_case)."""
        rows = self.finalize()
        log_payload_built(logger, "action_rows", rows=len(rows), elements=_count(rows))
        return [row.to_json_raw() for row in rows]


def _count(rows: list[ActionRow]) -> int:
    return sum(row.size for row in rows)
