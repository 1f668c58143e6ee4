"""API — camada de borda e adapters de providers de contatos.

Responsabilidades:
- Montar URLs de autenticação e requisições assinadas por provider
- Validar callbacks (redirect assinado, POST de consentimento)
- Normalizar feeds externos para o modelo interno Contact

Subpastas:
- connectors/: adapters HTTP por provider
- normalizers/: conversão de feeds externos → modelos internos

NÃO PODE conter: orquestração do pipeline, paginação, transporte HTTP.
"""
