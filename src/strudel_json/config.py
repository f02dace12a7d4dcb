"""Fixed configuration for manifest generation and watching."""

# Audio file extensions included in the manifest (compared lowercase)
AUDIO_EXTENSIONS = frozenset({".wav", ".mp3", ".flac", ".aiff"})

# Name of the manifest written at the root of the scanned directory
MANIFEST_FILENAME = "strudel.json"

# Reserved manifest key holding the base URL
BASE_KEY = "_base"

DEFAULT_BRANCH = "main"

GITHUB_RAW_URL = "https://raw.githubusercontent.com/{user}/{repo}/{branch}/"

# Quiet period before a burst of filesystem events triggers regeneration
DEBOUNCE_SECONDS = 1.0

JSON_INDENT = 4
