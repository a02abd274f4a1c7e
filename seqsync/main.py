"""FastAPI application for the SeqSync alignment viewer."""
import logging
import os
from functools import lru_cache
from fastapi import FastAPI, HTTPException, UploadFile, File
from seqsync.schemas import (
    AlignmentMode, AlignmentReport, AlignmentRequest, AlignmentResponse,
    AlignmentResult, ExamplePair, ParseTextRequest, ScoringModel, Sequence
)
from seqsync.sequences import (
    EXAMPLE_PAIRS, detect_sequence_type, normalize_sequence, parse_fasta
)
from seqsync.alignment import (
    DEFAULT_SCORING, InvalidInputError, align, build_matrix_view,
    calculate_alignment_stats, format_alignment
)

logger = logging.getLogger(__name__)

# Cells per score matrix; 1M cells keeps one response in the tens of MB.
MAX_MATRIX_CELLS = int(os.environ.get("SEQSYNC_MAX_MATRIX_CELLS", "1000000"))
CACHE_SIZE = int(os.environ.get("SEQSYNC_CACHE_SIZE", "16"))

app = FastAPI(title="SeqSync", version="1.0")

@lru_cache(maxsize=CACHE_SIZE)
def cached_alignment(
    mode: AlignmentMode, seq1: str, seq2: str, scoring: ScoringModel
) -> AlignmentResult:
    """Memoized engine call keyed on (mode, seq1, seq2, scoring)."""
    return align(mode, seq1, seq2, scoring)

def build_report(
    mode: AlignmentMode, seq1: str, seq2: str, scoring: ScoringModel
) -> AlignmentReport:
    """Run one aligner and derive statistics, text and matrix view."""
    result = cached_alignment(mode, seq1, seq2, scoring)
    return AlignmentReport(
        result=result,
        statistics=calculate_alignment_stats(result.aligned_seq1, result.aligned_seq2),
        formatted=format_alignment(result.aligned_seq1, result.aligned_seq2),
        matrix_view=build_matrix_view(result, seq1, seq2)
    )

# --- Alignment endpoints ---

@app.post("/api/align")
def align_endpoint(request: AlignmentRequest) -> AlignmentResponse:
    """Align two sequences globally, locally or both."""
    seq1 = normalize_sequence(request.seq1)
    seq2 = normalize_sequence(request.seq2)

    cells = (len(seq1) + 1) * (len(seq2) + 1)
    if cells > MAX_MATRIX_CELLS:
        logger.warning(
            "Rejected alignment of %d x %d symbols (%d cells, limit %d)",
            len(seq1), len(seq2), cells, MAX_MATRIX_CELLS
        )
        raise HTTPException(
            status_code=413,
            detail=f"Score matrix of {cells} cells exceeds the limit of {MAX_MATRIX_CELLS}"
        )

    modes = [AlignmentMode.GLOBAL, AlignmentMode.LOCAL]
    if request.algorithm != "both":
        modes = [AlignmentMode(request.algorithm)]

    response = AlignmentResponse()
    try:
        for mode in modes:
            report = build_report(mode, seq1, seq2, request.scoring)
            if mode is AlignmentMode.GLOBAL:
                response.global_alignment = report
            else:
                response.local_alignment = report
    except InvalidInputError as e:
        logger.warning("Alignment rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return response

@app.get("/api/scoring/default")
async def default_scoring() -> ScoringModel:
    """Default match/mismatch/gap scores."""
    return DEFAULT_SCORING

# --- Example endpoints ---

@app.get("/api/examples")
async def list_examples() -> list[ExamplePair]:
    """List example sequence pairs."""
    return list(EXAMPLE_PAIRS.values())

@app.get("/api/examples/{name}")
async def get_example(name: str) -> ExamplePair:
    """Get an example sequence pair by name."""
    if name not in EXAMPLE_PAIRS:
        raise HTTPException(status_code=404, detail=f"Example not found: {name}")
    return EXAMPLE_PAIRS[name]

# --- Sequence endpoints ---

@app.post("/api/parse-fasta")
async def parse_fasta_endpoint(file: UploadFile = File(...)) -> list[Sequence]:
    """Parse uploaded FASTA file."""
    content = await file.read()
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not UTF-8 text")
    sequences = parse_fasta(text)
    if not sequences:
        raise HTTPException(status_code=400, detail="No valid sequences found")
    return sequences

@app.post("/api/parse-text")
async def parse_text(request: ParseTextRequest) -> list[Sequence]:
    """Parse pasted sequence text."""
    sequences = parse_fasta(request.text)
    if not sequences:
        raise HTTPException(status_code=400, detail="No valid sequences found")
    return sequences

@app.get("/api/detect-type")
async def detect_type(sequence: str) -> dict:
    """Detect if sequence is DNA or protein."""
    return {"type": detect_sequence_type(sequence)}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
