"""Central configuration: constants used by the loader, driver and CLI."""

# ── Dataset ──────────────────────────────────────────────────────────────────
DEFAULT_DATASET_PATH = "dataset.csv"
COLUMNS: tuple[str, ...] = ("S", "K", "T", "r", "sigma")
N_COLUMNS = len(COLUMNS)

# ── Output ───────────────────────────────────────────────────────────────────
SUMMARY_TEMPLATE = "Calculating put and call for {n} options took {elapsed:.6f} seconds"
PRICE_COLUMNS: tuple[str, ...] = COLUMNS + ("call", "put")

# ── Synthetic dataset ranges: value = low + width * U[0, 1) ─────────────────
GENERATOR_DEFAULT_ROWS = 1000
GENERATOR_RANGES: dict[str, tuple[float, float]] = {
    "S":     (25.0, 50.0),
    "K":     (50.0, 100.0),
    "T":     (0.5, 1.0),
    "r":     (0.025, 0.05),
    "sigma": (0.175, 0.25),
}
