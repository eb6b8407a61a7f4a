"""App: orquestração, casos de uso e infraestrutura do bot.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: roteamento de eventos inbound
- use_cases/: vínculo de imagem a preset
- services/: resposta por preset ou eco
- domain/: presets, admins e vínculos pendentes
- infra/: storage de objetos (GCS, memória)
- protocols/: contratos e modelos canônicos
- observability/: correlation_id e métricas via logs
- constants/: constantes e textos de resposta

Padrão: app executa; api adapta; config configura; utils apoia.
"""
