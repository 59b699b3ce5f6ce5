import os

WINDOW_SIZE = int(os.environ.get("NOVELMOOD_WINDOW_SIZE", "80"))
TOP_WORDS_THRESHOLD = int(os.environ.get("NOVELMOOD_TOP_WORDS_THRESHOLD", "150"))
MAX_WORDS = int(os.environ.get("NOVELMOOD_MAX_WORDS", "100"))

# Word-cloud layout is randomised; pin it so reruns give the same picture
SEED = int(os.environ.get("NOVELMOOD_SEED", "42"))

LOG_LEVEL = os.environ.get("NOVELMOOD_LOG_LEVEL", "INFO")

CHAPTER_PATTERN = r"^chapter [\divxlc]"
