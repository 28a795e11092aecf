"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura

Domínios:
- clientes: Cadastro de clientes
- creditos: Solicitação e consulta de créditos
"""
