"""App — orquestração do relay, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (relay de pushes)
- infra/: implementações concretas de IO (stores)
- protocols/: contratos/interfaces e modelos
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
