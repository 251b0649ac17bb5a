from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from utils.formatter_utils import to_normalized_address


class NetworkAddresses(BaseModel):
    """Deployed contract addresses of one governance stack."""

    model_config = ConfigDict(frozen=True)

    dao: Optional[str] = None
    agent: Optional[str] = None
    voting: Optional[str] = None
    agreement: Optional[str] = None
    court: Optional[str] = None
    # Read from the agreement when not configured
    staking_factory: Optional[str] = None

    @field_validator("*")
    @classmethod
    def _checksum(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        address = to_normalized_address(value)
        if address is None:
            raise ValueError(f"Invalid address: {value}")
        return address


class CourtConfig(BaseModel):
    """
    Aragon Court parameters used when proposing a court config change.
    Durations are in court terms, percentages in basis points (10000 = 100%)
    and fees in 18-decimal fee token units.
    """

    model_config = ConfigDict(frozen=True)

    fee_token: str
    evidence_terms: int
    commit_terms: int
    reveal_terms: int
    appeal_terms: int
    appeal_confirm_terms: int
    max_jurors_per_draft_batch: int
    juror_fee: int
    draft_fee: int
    settle_fee: int
    penalty_pct: int
    final_round_reduction: int
    first_round_jurors_number: int
    appeal_step_factor: int
    max_regular_appeal_rounds: int
    final_round_lock_terms: int
    appeal_collateral_factor: int
    appeal_confirm_collateral_factor: int
    final_round_weight_precision: int
    min_active_balance: int


class NetworkConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    addresses: NetworkAddresses
    court: Optional[CourtConfig] = None
