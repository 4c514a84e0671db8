"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- discord/: componentes, embeds e application commands da API Discord

Builders só montam estruturas em memória; envio, autenticação e rate
limit ficam fora deste pacote.
"""

__all__: list[str] = []
