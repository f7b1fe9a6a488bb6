"""
Integration tests package.

Tests de integración del servicio de rentas que levantan la aplicación completa
(FastAPI TestClient con su lifespan) y verifican:
- Health checks: liveness y readiness, incluyendo el 503 cuando la base de
  datos configurada no responde.

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
