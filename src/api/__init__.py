"""API: camada de borda com o LINE.

Responsabilidades:
- Receber o webhook e validar a assinatura
- Decodificar eventos para modelos internos
- Construir payloads da Messaging API

Subpastas:
- connectors/: cliente HTTP e validação de webhook do LINE
- normalizers/: eventos do webhook → modelos internos
- payload_builders/: respostas internas → mensagens do LINE
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras de preset, admins ou vínculo de imagens.
"""
