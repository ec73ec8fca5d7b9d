from pathlib import Path

from fastapi.templating import Jinja2Templates

from .config import settings
from .store import WordStore
from .trainer import VocabTrainer

PACKAGE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))
trainer = VocabTrainer(WordStore(settings.STORAGE_KEY))


def get_trainer() -> VocabTrainer:
    return trainer
