#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ..client import MunaAPIError, MunaClient
from ..types import User

class UserService:

    def __init__(self, client: MunaClient):
        self.client = client

    def retrieve(self) -> User | None:
        """
        Retrieve the current user.

        Returns:
            User: User. This is `None` if the access key is missing or invalid.
        """
        try:
            return self.client.request(
                method="GET",
                path="/users",
                response_type=User
            )
        except MunaAPIError as error:
            if error.status_code == 401:
                return None
            raise
