import uvicorn

from airport_ops.main import create_app

# Necesita DATABASE_URL (p.ej. "memory://" para datos de prueba en memoria)
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
