import sys

import uvicorn
from loguru import logger

from revolver.api import create_app
from revolver.config import settings
from revolver.heuristics.provider import HeuristicProvider
from revolver.services.notebook import Notebook
from revolver.stores.local import LocalCollectionStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

store = LocalCollectionStore(settings.store_path)
store.ensure_store()
provider = HeuristicProvider(
    settings.ai_provider,
    max_tags=settings.max_analyze_tags,
    max_related=settings.max_related_notes,
)
notebook = Notebook(store=store, provider=provider)
app = create_app(notebook=notebook)

if __name__ == "__main__":
    logger.info(
        f"Revolver backend listening on http://{settings.host}:{settings.port} "
        f"(AI provider: {settings.ai_provider.value})"
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
