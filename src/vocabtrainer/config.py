import os


class Settings:
    PROJECT_NAME: str = "vocabtrainer"
    DEBUG: bool = os.environ.get("VOCAB_DEBUG", "") == "1"
    LOG_DIR: str = os.environ.get("VOCAB_LOG_DIR", "log")
    LOG_FILE: str = "vocabtrainer.log"
    DB_DIR: str = os.environ.get("VOCAB_DB_DIR", "db")
    DB_FILE: str = "vocabtrainer.db"
    STORAGE_KEY: str = "mini-vocab-trainer:v1"
    CHOICES_PER_QUESTION: int = 4
    MIN_QUIZ_WORDS: int = 2
    QUIZ_MODE: str = "cycle"
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
