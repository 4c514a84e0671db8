"""Validators por canal — validação de payloads para APIs externas.

Estrutura:
- discord/: limites de componentes, embeds e application commands

Validação acontece na borda; o motor de layout nunca falha.
"""

__all__: list[str] = []
