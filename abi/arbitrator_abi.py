# --- ARBITRATOR (Aragon Court v1, IArbitrator + config governor surface) ---
ARBITRATOR_ABI = [
    {
        "inputs": [],
        "name": "getDisputeFees",
        "outputs": [
            {"name": "recipient", "type": "address"},
            {"name": "feeToken", "type": "address"},
            {"name": "feeAmount", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_subscriber", "type": "address"}],
        "name": "getSubscriptionFees",
        "outputs": [
            {"name": "recipient", "type": "address"},
            {"name": "feeToken", "type": "address"},
            {"name": "feeAmount", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_fromTermId", "type": "uint64"},
            {"name": "_feeToken", "type": "address"},
            {"name": "_fees", "type": "uint256[3]"},
            {"name": "_roundStateDurations", "type": "uint64[5]"},
            {"name": "_pcts", "type": "uint16[2]"},
            {"name": "_roundParams", "type": "uint64[4]"},
            {"name": "_appealCollateralParams", "type": "uint256[2]"},
            {"name": "_minActiveBalance", "type": "uint256"}
        ],
        "name": "setConfig",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

COURT_SUBSCRIPTIONS_ABI = [
    {
        "inputs": [{"name": "_subscriber", "type": "address"}],
        "name": "getSubscriber",
        "outputs": [
            {"name": "subscribed", "type": "bool"},
            {"name": "paused", "type": "bool"},
            {"name": "lastPaymentPeriodId", "type": "uint64"},
            {"name": "previousDelayedPeriods", "type": "uint64"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_subscriber", "type": "address"}],
        "name": "getOwedFeesDetails",
        "outputs": [
            {"name": "feeToken", "type": "address"},
            {"name": "amountToPay", "type": "uint256"},
            {"name": "newLastPeriodId", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_from", "type": "address"},
            {"name": "_periods", "type": "uint256"}
        ],
        "name": "payFees",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
