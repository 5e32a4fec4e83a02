from typing import Any

from horizon_sdk.models.base import HorizonModel


class ResultCodes(HorizonModel):
    transaction: str | None = None
    operations: list[str] = []


class Problem(HorizonModel):
    """RFC 7807 problem document returned on error responses."""

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None
    extras: dict[str, Any] = {}

    @property
    def result_codes(self) -> ResultCodes | None:
        raw = self.extras.get("result_codes")
        if not isinstance(raw, dict):
            return None
        return ResultCodes.model_validate(raw)

    @property
    def result_xdr(self) -> str | None:
        return self.extras.get("result_xdr")

    @property
    def envelope_xdr(self) -> str | None:
        return self.extras.get("envelope_xdr")
