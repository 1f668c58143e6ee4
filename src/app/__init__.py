"""App — núcleo da importação: pipeline, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories de fetchers e connectors)
- services/: pipeline de importação e paginação
- infra/: implementações concretas de IO (http, crypto)
- protocols/: contratos/interfaces dos providers
- domain/: Contact e ContactFeed
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
