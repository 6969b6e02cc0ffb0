"""
Landing page.

Route: GET /  (HTML with links to the docs and main endpoints)

Dependencies: fastapi
System role: Human-facing entry point
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["home"], include_in_schema=False)

HOME_TEMPLATE = """<!DOCTYPE html>
<html lang="pt-BR">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>API de CEP - Bem-vindo</title>
  <style>
    body {{ font-family: -apple-system, 'Segoe UI', Roboto, Arial, sans-serif;
           background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
           min-height: 100vh; display: flex; justify-content: center;
           align-items: center; margin: 0; padding: 20px; }}
    .container {{ background: white; border-radius: 20px; padding: 40px;
                 max-width: 650px; width: 100%; box-shadow: 0 20px 60px rgba(0,0,0,.3); }}
    h1 {{ color: #333; text-align: center; }}
    .status {{ display: block; width: fit-content; margin: 20px auto;
              background: #10b981; color: white; padding: 8px 24px; border-radius: 25px; }}
    a.card {{ display: block; padding: 16px 20px; margin: 12px 0; border-radius: 12px;
              background: #f5f5ff; color: #4c51bf; text-decoration: none; }}
    a.card:hover {{ background: #e9e9ff; }}
    code {{ color: #555; }}
  </style>
</head>
<body>
  <div class="container">
    <h1>API de Consulta de CEP</h1>
    <span class="status">Online &bull; v{version}</span>
    <a class="card" href="{docs_url}">Documentação interativa (Swagger UI)</a>
    <a class="card" href="{redoc_url}">Documentação (ReDoc)</a>
    <a class="card" href="{prefix}/health">Health check</a>
    <a class="card" href="{prefix}/addresses/cep/01310100">
      Exemplo: <code>GET {prefix}/addresses/cep/01310100</code>
    </a>
    <a class="card" href="{prefix}/addresses">
      Listar endereços: <code>GET {prefix}/addresses</code>
    </a>
  </div>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Render the landing page."""
    app = request.app
    return HTMLResponse(
        HOME_TEMPLATE.format(
            version=app.version,
            docs_url=app.docs_url or "/docs",
            redoc_url=app.redoc_url or "/redoc",
            prefix=app.state.api_prefix,
        )
    )
