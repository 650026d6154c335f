"""Fixed naming conventions shared across the package."""

# Current project file extension
PROJECT_FILE_EXTENSION = ".json"

# Extension written by earlier releases of the tool
LEGACY_PROJECT_FILE_EXTENSION = ".fottproj"

# Marker key holding ciphertext inside connection provider options
ENCRYPTED_OPTIONS_KEY = "encrypted"

HOME_ROUTE = "/"
CREATE_PROJECT_ROUTE = "/projects/create"


def edit_project_route(project_id: str) -> str:
    return f"/projects/{project_id}/edit"
