"""Filters de logging para injeção de contexto.

Campos injetados:
- payload_id: ID do payload em construção (mensagem, modal, comando)
- service: Nome do serviço que usa os builders

Logs nunca carregam conteúdo de usuário (labels, values, descrições).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class PayloadContextFilter(logging.Filter):
    """Injeta payload_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        payload_id_getter: Função que retorna o payload_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        payload_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_payload_id = payload_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona payload_id e service ao record.

        Um payload_id passado via `extra` tem precedência sobre o getter.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "payload_id", None)
        record.payload_id = existing if existing else self._get_payload_id()
        record.service = self._service_name
        return True
