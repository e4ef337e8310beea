from typing import Dict


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
