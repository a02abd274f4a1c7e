"""Sequence parsing and example presets."""
from io import StringIO
from Bio import SeqIO
from seqsync.schemas import ExamplePair, Sequence

EXAMPLE_PAIRS = {
    "dna": ExamplePair(
        name="dna", description="Short DNA fragments",
        seq1="ACGTGATCA", seq2="AGCTACCA"
    ),
    "protein": ExamplePair(
        name="protein", description="Classic protein pair",
        seq1="HEAGAWGHEE", seq2="PAWHEAE"
    ),
    "similar": ExamplePair(
        name="similar", description="Identical sequences",
        seq1="GGTTGACTA", seq2="GGTTGACTA"
    ),
    "different": ExamplePair(
        name="different", description="No shared symbols",
        seq1="AAAAAAA", seq2="TTTTTTT"
    ),
}

def normalize_sequence(sequence: str) -> str:
    """Drop whitespace and uppercase, as the engine expects."""
    return "".join(sequence.split()).upper()

def parse_fasta(content: str) -> list[Sequence]:
    """Parse FASTA format text into Sequence objects."""
    sequences = []
    text = content.strip()

    if text.startswith(">"):
        for record in SeqIO.parse(StringIO(text), "fasta"):
            if not len(record.seq):
                continue
            sequences.append(Sequence(
                id=record.id,
                name=record.description,
                sequence=normalize_sequence(str(record.seq)),
                source="fasta"
            ))

    # Handle raw sequence (no header)
    elif text:
        clean = normalize_sequence(text)
        if clean.isalpha():
            sequences.append(Sequence(
                id="pasted",
                name="Pasted sequence",
                sequence=clean,
                source="paste"
            ))

    return sequences

def detect_sequence_type(sequence: str) -> str:
    """Detect if sequence is DNA/RNA or protein."""
    upper = sequence.upper()
    if not upper:
        return "dna"
    dna_chars = set("ATGCUN")
    dna_count = sum(1 for c in upper if c in dna_chars)
    return "dna" if dna_count / len(upper) > 0.9 else "protein"
