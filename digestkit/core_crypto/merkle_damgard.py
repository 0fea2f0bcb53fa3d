"""
Generic Merkle-Damgard Block Engine

MD5, SHA-1 and SHA-256 share one skeleton:

    Init -> (ExpandSchedule -> RunRounds -> Accumulate)* -> Assemble

Each algorithm is a HashAlgorithm: a bundle of data tables and small step
functions. This module drives the skeleton; md5.py, sha1.py and sha256.py
only describe what differs.

Block processing is strictly sequential. Block i is compressed starting from
the state produced by block i-1, so blocks of one message can never be
processed in parallel. Separate messages share no state.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .bits import InvariantError, block_words, pad_message, split_blocks
from .words import add32
from ..integration.tracing import BlockTrace, RoundTrace, Tracer, default_tracer


@dataclass(frozen=True)
class RoundParameters:
    """Per-round inputs that do not depend on the message."""
    index: int
    stage: int
    schedule_index: int
    constant: int
    rotation: Optional[int] = None


@dataclass(frozen=True)
class HashAlgorithm:
    """
    Parameterization of one Merkle-Damgard hash function.

    Attributes:
        name: Algorithm name used in traces ('md5', 'sha1', 'sha256')
        initial_state: Magic constants the hash state starts from
        length_byteorder: Byte order of the 64-bit padding length field
        word_byteorder: Byte order of block words and digest output
        schedule_length: Words in the message schedule (16 / 80 / 64)
        rounds: Compression rounds per block (64 / 80 / 64)
        expand_schedule: 16 block words -> full message schedule
        round_table: RoundParameters for every round, built once at import
        round_step: (registers, schedule word, parameters) -> new registers
    """
    name: str
    initial_state: Tuple[int, ...]
    length_byteorder: str
    word_byteorder: str
    schedule_length: int
    rounds: int
    expand_schedule: Callable[[List[int]], List[int]]
    round_table: Tuple[RoundParameters, ...]
    round_step: Callable[[List[int], int, RoundParameters], List[int]]

    def __post_init__(self):
        if len(self.round_table) != self.rounds:
            raise InvariantError(
                f"{self.name} round table has {len(self.round_table)} entries, "
                f"expected {self.rounds}"
            )

    @property
    def digest_size(self) -> int:
        """Digest size in bytes."""
        return 4 * len(self.initial_state)

    @property
    def hex_length(self) -> int:
        return 2 * self.digest_size


def new_state(algorithm: HashAlgorithm) -> List[int]:
    """Create a fresh hash state owned by one computation."""
    return list(algorithm.initial_state)


def accumulate(state: Sequence[int], registers: Sequence[int]) -> List[int]:
    """
    Feed the working registers forward into the hash state.

    Element-wise addition modulo 2^32.
    """
    if len(state) != len(registers):
        raise InvariantError(
            f"State has {len(state)} words but registers have {len(registers)}"
        )
    return [add32(h, v) for h, v in zip(state, registers)]


def compress_block(
    algorithm: HashAlgorithm,
    state: Sequence[int],
    block: str,
    tracer: Optional[Tracer] = None,
    block_index: int = 0,
) -> List[int]:
    """
    Run one block through the compression function.

    Args:
        algorithm: Algorithm parameterization
        state: Hash state after the previous block (not modified)
        block: 512-bit block as a bit string
        tracer: Optional observer, called once per round and once per block
        block_index: Position of the block in the message, for traces

    Returns:
        New hash state
    """
    words = block_words(block, algorithm.word_byteorder)
    schedule = algorithm.expand_schedule(words)
    if len(schedule) != algorithm.schedule_length:
        raise InvariantError(
            f"{algorithm.name} schedule has {len(schedule)} words, "
            f"expected {algorithm.schedule_length}"
        )

    registers = list(state)
    for params in algorithm.round_table:
        registers = algorithm.round_step(registers, schedule[params.schedule_index], params)

        if tracer is not None:
            tracer.on_round(RoundTrace(
                algorithm=algorithm.name,
                block_index=block_index,
                index=params.index,
                registers=tuple(registers),
                schedule_index=params.schedule_index,
                constant=params.constant,
                rotation=params.rotation,
            ))

    new = accumulate(state, registers)

    if tracer is not None:
        tracer.on_block(BlockTrace(
            algorithm=algorithm.name,
            block_index=block_index,
            schedule=tuple(schedule),
            state=tuple(new),
        ))
    return new


def process_blocks(
    algorithm: HashAlgorithm,
    blocks: Sequence[str],
    tracer: Optional[Tracer] = None,
) -> List[int]:
    """Compress blocks in the given order, chaining the state through."""
    state = new_state(algorithm)
    for block_index, block in enumerate(blocks):
        state = compress_block(algorithm, state, block, tracer, block_index)
    return state


def digest_bytes(algorithm: HashAlgorithm, state: Sequence[int]) -> bytes:
    """Serialize the final hash state using the algorithm's word byte order."""
    if len(state) != len(algorithm.initial_state):
        raise InvariantError(
            f"{algorithm.name} state must have {len(algorithm.initial_state)} words"
        )
    return b''.join(
        word.to_bytes(4, byteorder=algorithm.word_byteorder) for word in state
    )


def assemble_digest(algorithm: HashAlgorithm, state: Sequence[int]) -> str:
    """Final hash state as a lowercase hexadecimal string."""
    digest = digest_bytes(algorithm, state).hex()
    if len(digest) != algorithm.hex_length:
        raise InvariantError(
            f"{algorithm.name} digest has {len(digest)} hex characters, "
            f"expected {algorithm.hex_length}"
        )
    return digest


def ensure_bytes(message) -> bytes:
    """Accept bytes-like input only; text must be encoded by the caller."""
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError(
        f"message must be bytes-like, not {type(message).__name__}"
    )


def hash_state(
    algorithm: HashAlgorithm,
    message: bytes,
    tracer: Optional[Tracer] = None,
) -> List[int]:
    """Pad, split and compress a message; return the terminal hash state."""
    message = ensure_bytes(message)
    if tracer is None:
        tracer = default_tracer()

    padded = pad_message(message, algorithm.length_byteorder)
    return process_blocks(algorithm, split_blocks(padded), tracer)


def hash_message(
    algorithm: HashAlgorithm,
    message: bytes,
    tracer: Optional[Tracer] = None,
) -> str:
    """
    Compute the hex digest of a message.

    If no tracer is given, one is created when tracing is enabled in the
    environment (see digestkit.config).
    """
    return assemble_digest(algorithm, hash_state(algorithm, message, tracer))
