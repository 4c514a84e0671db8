"""API — camada de borda com a plataforma de chat.

Responsabilidades:
- Construir payloads para a API externa
- Aplicar validações e limites de API

Subpastas:
- payload_builders/: construção de payloads por canal
- validators/: validação de payloads e limites

NÃO PODE conter: transporte HTTP, autenticação, persistência.
"""
