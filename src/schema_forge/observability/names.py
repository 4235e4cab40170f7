# src/schema_forge/observability/names.py

"""Standard metric names for schema-forge observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_RETRIES_TOTAL = "llm_retries_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Chunking Metrics
# ============================================================================

CHUNKING_DURATION = "chunking_duration"
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Summarization Metrics
# ============================================================================

SUMMARIZE_DURATION = "summarize_duration"
SUMMARIZE_CHUNKS_TOTAL = "summarize_chunks_total"


# ============================================================================
# Code Generation Metrics
# ============================================================================

CODEGEN_DURATION = "codegen_duration"
CODEGEN_ARTIFACTS_TOTAL = "codegen_artifacts_total"
CODEGEN_SKIPPED_TOTAL = "codegen_skipped_total"


# ============================================================================
# Pipeline Metrics
# ============================================================================

PIPELINE_RUN_DURATION = "pipeline_run_duration"
PIPELINE_STATEMENTS_FOUND = "pipeline_statements_found"
