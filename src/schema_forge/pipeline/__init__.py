from .orchestrator import PipelineOrchestrator, PipelineResult

__all__ = ["PipelineOrchestrator", "PipelineResult"]
