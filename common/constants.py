# Dataset / output locations
DATA_PATH = "data/cefr_dataset.csv"
OUTPUT_PATH = "output/output.json"

# Selection
DEFAULT_SAMPLE_SIZE = 10

# CSV columns (header names are lower-cased before matching)
COL_WORD = "word"
COL_LEVEL = "level"
COL_POS = "pos"
COL_FREQUENCY = "frequency"
POS_ALIASES = ("pos", "part_of_speech", "partofspeech")

# WordsAPI
WORDS_API_HOST = "wordsapiv1.p.rapidapi.com"
WORDS_API_BASE_URL = "https://wordsapiv1.p.rapidapi.com/words/"
HEADER_API_KEY = "X-RapidAPI-Key"
HEADER_API_HOST = "X-RapidAPI-Host"
REQUEST_DELAY_SECONDS = 0.1
REQUEST_TIMEOUT_SECONDS = 10.0

# Environment variables
ENV_API_KEY = "WORDS_API_KEY"
ENV_API_HOST = "WORDS_API_HOST"
ENV_API_BASE_URL = "WORDS_API_BASE_URL"
ENV_API_DELAY = "WORDS_API_DELAY"
ENV_API_TIMEOUT = "WORDS_API_TIMEOUT"
ENV_DATA_PATH = "CEFR_DATA_PATH"
ENV_OUTPUT_PATH = "CEFR_OUTPUT_PATH"
ENV_SAMPLE_SIZE = "CEFR_SAMPLE_SIZE"

# Lookup statuses
STATUS_FOUND = "found"
STATUS_NOT_FOUND = "not_found"
STATUS_ERROR = "error"

# Console report limits
REPORT_MAX_DEFINITIONS = 2
REPORT_MAX_EXAMPLES = 2
REPORT_MAX_SYNONYMS = 5
REPORT_RULE = "-" * 50
