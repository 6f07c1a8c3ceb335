"""intern3.chat documentation configuration."""

REPO_URL = "https://github.com/intern3-chat/intern3-chat.git"

# Folder at the repository root that holds the docs
DOCS_PATH = "docs"

# Output directory, relative to the working directory
OUTPUT_DIR = "content/docs"

# Prefix for the throwaway clone under the system temp dir
TEMP_PREFIX = "intern3-docs-clone"
