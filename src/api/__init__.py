"""API: camada de borda para serviços externos.

Subpastas:
- connectors/: clientes HTTP por serviço (IO)
- payload_builders/: construção de payloads JSON (sem IO)
"""
