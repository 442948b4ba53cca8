from typing import NewType

AuthToken = NewType("AuthToken", str)
