"""App — constantes e contratos compartilhados pelos builders.

Subpastas:
- constants/: enums de domínio (tipos de componente, estilos, permissões)
- protocols/: contratos/interfaces

Padrão: api adapta; app define o domínio; config configura; utils apoia.
"""
