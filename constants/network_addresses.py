# Deployed governance contracts per network.
# Addresses missing here (dao, agent, voting, agreement) are provided per deployment
# through the *_ADDRESS environment variables.
NETWORK_ADDRESSES = {
    "rinkeby": {
        # Aragon Court staging instance
        "court": "0x52180af656a1923024d1accf1d827ab85ce48878",
        # Staking factory instance on Rinkeby v0.3.1
        "staking_factory": "0x6a30c2de7359dB110b6322B41038674AE1D276Fb",
    },
}
