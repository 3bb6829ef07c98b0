"""
Delegation program constants.

Layout of the delegation record account owned by the MagicBlock
delegation program.
"""

DELEGATION_PROGRAM_ID = "DELeGGvXpWV2fqJUhqcF5ZSYMS4JTLjteaAMARRSaeSh"
DELEGATION_SEED = b"delegation"
DEFAULT_RPC_URL = "https://api.devnet.solana.com"

# Record layout (96 bytes)
DELEGATION_RECORD_DATA_SIZE = 96
DISCRIMINATOR_OFFSET = 0
DISCRIMINATOR_SIZE = 8
IDENTITY_OFFSET = 8
IDENTITY_SIZE = 32
METADATA_OFFSET = IDENTITY_OFFSET + IDENTITY_SIZE

MAGIC_ROUTER_URL = "https://api.magicrouter.com"
