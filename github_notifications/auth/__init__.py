from .credentials import GitHubCredentials, mask_token

__all__ = ["GitHubCredentials", "mask_token"]
