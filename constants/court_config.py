# Fake DAI used for the Aragon Court staging instance
RINKEBY_DAI = "0x3af6b2f907f0c55f279e0ed65751984e6cdc4a42"

ONE_TOKEN = 10 ** 18

COURT_CONFIGS = {
    "rinkeby": {
        "fee_token": RINKEBY_DAI,                        # fee token for the court is DAI
        "evidence_terms": 21,                            # evidence period lasts 21 terms (7 days)
        "commit_terms": 6,                               # vote commits last 6 terms (2 days)
        "reveal_terms": 6,                               # vote reveals last 6 terms (2 days)
        "appeal_terms": 6,                               # appeals last 6 terms (2 days)
        "appeal_confirm_terms": 6,                       # appeal confirmations last 6 terms (2 days)
        "max_jurors_per_draft_batch": 81,                # max number of jurors drafted per batch
        "juror_fee": 40 * ONE_TOKEN,                     # 40 fee tokens for juror fees
        "draft_fee": 6 * ONE_TOKEN,                      # 6 fee tokens for draft fees
        "settle_fee": 4 * ONE_TOKEN,                     # 4 fee tokens for settle fees
        "penalty_pct": 1000,                             # 10% of the min active balance locked per drafted juror
        "final_round_reduction": 5000,                   # 50% discount for final rounds
        "first_round_jurors_number": 3,                  # disputes start with 3 jurors
        "appeal_step_factor": 3,                         # jurors drafted grow 3 times on each appeal
        "max_regular_appeal_rounds": 4,                  # up to 4 appeals in total per dispute
        "final_round_lock_terms": 21,                    # coherent final round jurors locked for 21 terms (7 days)
        "appeal_collateral_factor": 30000,               # appeal collateral is 3x the juror fees
        "appeal_confirm_collateral_factor": 20000,       # appeal-confirmation collateral is 2x the juror fees
        "final_round_weight_precision": 1000,            # improves division rounding for final round maths
        "min_active_balance": 100 * ONE_TOKEN,           # 100 ANJ minimum active balance for jurors
    },
}
