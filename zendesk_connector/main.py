"""
Zendesk Connector - FastAPI entrypoint
"""
from fastapi import FastAPI
from zendesk_connector import __version__
from zendesk_connector.routes import health, tickets

app = FastAPI(
    title="Zendesk Connector",
    description="Create Zendesk tickets from workflow tasks",
    version=__version__
)

app.include_router(tickets.router)
app.include_router(health.router)


@app.get("/")
async def root():
    return {"message": "Zendesk Connector API", "version": __version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
