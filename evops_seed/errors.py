class SeedError(Exception):
    pass


class ConfigError(SeedError):
    pass


class CatalogError(SeedError):
    pass


class UploadError(SeedError):
    pass


class RpcError(SeedError):
    """Non-OK gRPC status returned by the API."""

    def __init__(self, code: int, message: str = ""):
        self.code = code
        self.message = message
        super().__init__(f"grpc-status {code}: {message}" if message else f"grpc-status {code}")
