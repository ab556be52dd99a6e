"""Static catalog of the operations exposed to the agent."""

from directus_mcp._internal.operations.models import ArgumentSpec, OperationSpec
from directus_mcp.exceptions import UnknownOperationError

# =============================================================================
# Shared Arguments
# =============================================================================

URL_ARG = ArgumentSpec(name="url", description="Directus API URL (default from config)")
TOKEN_ARG = ArgumentSpec(name="token", description="Authentication token (default from config)")
QUERY_ARG = ArgumentSpec(
    name="query",
    type="object",
    description="Query parameters like filter, sort, limit, etc. (optional)",
)


def _collection(required: bool = True, description: str = "Collection name") -> ArgumentSpec:
    return ArgumentSpec(name="collection", description=description, required=required)


def _id() -> ArgumentSpec:
    return ArgumentSpec(name="id", description="Item ID", required=True)


def _data(description: str) -> ArgumentSpec:
    return ArgumentSpec(name="data", type="object", description=description, required=True)


# =============================================================================
# Catalog
# =============================================================================

OPERATIONS: tuple[OperationSpec, ...] = (
    OperationSpec(
        name="getItems",
        description="Get items from a collection in Directus",
        path="/items/{collection}",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, _collection(), QUERY_ARG),
    ),
    OperationSpec(
        name="getItem",
        description="Get a single item from a collection by ID",
        path="/items/{collection}/{id}",
        query_arg="query",
        arguments=(
            URL_ARG,
            TOKEN_ARG,
            _collection(),
            _id(),
            QUERY_ARG.model_copy(update={"description": "Query parameters (optional)"}),
        ),
    ),
    OperationSpec(
        name="createItem",
        description="Create a new item in a collection",
        method="POST",
        path="/items/{collection}",
        body_arg="data",
        arguments=(URL_ARG, TOKEN_ARG, _collection(), _data("Item data")),
    ),
    OperationSpec(
        name="updateItem",
        description="Update an existing item in a collection",
        method="PATCH",
        path="/items/{collection}/{id}",
        body_arg="data",
        arguments=(URL_ARG, TOKEN_ARG, _collection(), _id(), _data("Updated item data")),
    ),
    OperationSpec(
        name="deleteItem",
        description="Delete an item from a collection",
        method="DELETE",
        path="/items/{collection}/{id}",
        arguments=(URL_ARG, TOKEN_ARG, _collection(), _id()),
        success_message="Item deleted successfully",
    ),
    OperationSpec(
        name="getSystemInfo",
        description="Get system information from Directus",
        path="/server/{endpoint}",
        arguments=(
            URL_ARG,
            TOKEN_ARG,
            ArgumentSpec(
                name="endpoint",
                description="System endpoint (e.g. 'health', 'info', 'activity')",
                required=True,
                path_safe="/",
            ),
        ),
    ),
    OperationSpec(
        name="getCollections",
        description="Get all collection schemas from Directus",
        path="/collections",
        arguments=(URL_ARG, TOKEN_ARG),
    ),
    OperationSpec(
        name="login",
        description="Login to Directus and get an access token",
        kind="login",
        method="POST",
        path="/auth/login",
        arguments=(
            URL_ARG,
            ArgumentSpec(name="email", description="User email (default from config)"),
            ArgumentSpec(name="password", description="User password (default from config)"),
        ),
    ),
    OperationSpec(
        name="getActivity",
        description="Get activity logs from Directus",
        path="/activity",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, QUERY_ARG),
    ),
    OperationSpec(
        name="getFields",
        description="Get fields for a collection",
        path="/fields/{collection}",
        arguments=(URL_ARG, TOKEN_ARG, _collection()),
    ),
    OperationSpec(
        name="getRelations",
        description="Get relations for a collection",
        path="/relations",
        path_suffix_arg="collection",
        arguments=(
            URL_ARG,
            TOKEN_ARG,
            _collection(required=False, description="Collection name (optional)"),
        ),
    ),
    OperationSpec(
        name="getFiles",
        description="Get files from Directus",
        path="/files",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, QUERY_ARG),
    ),
    OperationSpec(
        name="uploadFile",
        description="Upload a file to Directus",
        kind="upload",
        method="POST",
        path="/files",
        arguments=(
            URL_ARG,
            TOKEN_ARG,
            ArgumentSpec(
                name="fileUrl",
                description=(
                    "URL of the file to upload (either fileUrl or fileData must be provided)"
                ),
            ),
            ArgumentSpec(
                name="fileData",
                description=(
                    "Base64 encoded file data (either fileUrl or fileData must be provided)"
                ),
            ),
            ArgumentSpec(name="fileName", description="Name of the file", required=True),
            ArgumentSpec(name="mimeType", description="MIME type of the file"),
            ArgumentSpec(name="storage", description="Storage location (optional)"),
            ArgumentSpec(name="title", description="File title (optional)"),
        ),
    ),
    OperationSpec(
        name="getUsers",
        description="Get users from Directus",
        path="/users",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, QUERY_ARG),
    ),
    OperationSpec(
        name="getCurrentUser",
        description="Get the current user info",
        path="/users/me",
        arguments=(URL_ARG, TOKEN_ARG),
    ),
    OperationSpec(
        name="getRoles",
        description="Get roles from Directus",
        path="/roles",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, QUERY_ARG),
    ),
    OperationSpec(
        name="getPermissions",
        description="Get permissions from Directus",
        path="/permissions",
        query_arg="query",
        arguments=(URL_ARG, TOKEN_ARG, QUERY_ARG),
    ),
    OperationSpec(
        name="getConfig",
        description="Get current configuration information (without secrets)",
        kind="config",
    ),
)

_BY_NAME: dict[str, OperationSpec] = {spec.name: spec for spec in OPERATIONS}


def lookup(name: str) -> OperationSpec:
    """Return the spec registered under `name`.

    Raises:
        UnknownOperationError: If no operation has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def list_operations() -> tuple[OperationSpec, ...]:
    """All registered operations, in catalog order."""
    return OPERATIONS
