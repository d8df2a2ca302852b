import numpy as np
import pytest
import nucpack.sequence as seq

SEQ_LENGTH = 1_000_000


@pytest.fixture(scope="module")
def dna_string():
    rng = np.random.default_rng(0)
    return "".join(rng.choice(list("ACGT"), size=SEQ_LENGTH))


@pytest.fixture(scope="module")
def packed_sequence(dna_string):
    return seq.PackedSequence(dna_string)


@pytest.mark.benchmark
def benchmark_from_string(dna_string):
    seq.PackedSequence.from_string(dna_string)


@pytest.mark.benchmark
def benchmark_from_symbols(packed_sequence):
    seq.PackedSequence.from_symbols(packed_sequence.symbols)


@pytest.mark.benchmark
def benchmark_get(packed_sequence):
    for position in range(1, SEQ_LENGTH + 1, 1000):
        packed_sequence.get(position)


@pytest.mark.benchmark
def benchmark_str(packed_sequence):
    str(packed_sequence)
