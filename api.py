import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    # Single worker: invoice creation serialises on a per-process lock
    uvicorn.run(
        app,
        host=ApplicationConfig.API_HOST,
        port=int(ApplicationConfig.API_PORT),
        workers=1,
        log_level=str(ApplicationConfig.LOG_LEVEL).lower(),
    )
