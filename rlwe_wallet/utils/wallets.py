from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from Crypto.Hash import RIPEMD160, keccak

from rlwe_wallet.models import BtcKeys, EthKeys
from rlwe_wallet.utils.entropy import check_entropy

B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BTC_P2PKH_VERSION = b"\x00"  # mainnet

# -----------------------------
# Hash Helpers
# -----------------------------
def sha256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()

def hash160(data: bytes) -> bytes:
    """RIPEMD-160 over SHA-256, the Bitcoin public key hash."""
    return RIPEMD160.new(sha256(data)).digest()

def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()

# -----------------------------
# Base58
# -----------------------------
def base58_encode(data: bytes) -> str:
    """
    Bitcoin Base58 encoding.

    The payload is read as one big-endian integer and written in base 58;
    each leading zero byte becomes a leading '1'.
    """
    num = int.from_bytes(data, "big")
    out = []
    while num > 0:
        num, rem = divmod(num, 58)
        out.append(B58_ALPHABET[rem])
    pad = len(data) - len(data.lstrip(b"\x00"))
    return "1" * pad + "".join(reversed(out))

def base58check_encode(payload: bytes) -> str:
    """Base58 of payload followed by the first 4 bytes of double SHA-256."""
    checksum = sha256(sha256(payload))[:4]
    return base58_encode(payload + checksum)

# -----------------------------
# secp256k1 Keys
# -----------------------------
def _secp256k1_key(entropy: bytes) -> ec.EllipticCurvePrivateKey:
    check_entropy(entropy)
    return ec.derive_private_key(int.from_bytes(entropy, "big"), ec.SECP256K1())

def btc_keys(entropy: bytes, compressed: bool = True) -> BtcKeys:
    """
    Bitcoin key pair and P2PKH address from 32 bytes of entropy.

    The entropy is used directly as the secp256k1 private scalar. The
    address is Base58Check(0x00 || HASH160(public_key)).

    Args:
        entropy: 32-byte private key
        compressed: Encode the public key as a 33-byte compressed point

    Returns:
        BtcKeys with hex private key, hex public key and address

    Raises:
        EntropyLengthInvalid: If entropy is not 32 bytes
    """
    key = _secp256k1_key(entropy)
    fmt = serialization.PublicFormat.CompressedPoint if compressed else serialization.PublicFormat.UncompressedPoint
    pub = key.public_key().public_bytes(serialization.Encoding.X962, fmt)
    address = base58check_encode(BTC_P2PKH_VERSION + hash160(pub))
    return BtcKeys(private_key=entropy.hex(), public_key=pub.hex(), address=address)

def eth_keys(entropy: bytes) -> EthKeys:
    """
    Ethereum private key and address from 32 bytes of entropy.

    The address is the last 20 bytes of Keccak-256 over the 64-byte
    uncompressed public key (0x04 prefix dropped), hex encoded with 0x.

    Raises:
        EntropyLengthInvalid: If entropy is not 32 bytes
    """
    key = _secp256k1_key(entropy)
    pub = key.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
    )[1:]
    address = "0x" + keccak256(pub)[-20:].hex()
    return EthKeys(private_key=entropy.hex(), address=address)
