# Fixed wording for conversion failures; detail is appended by the raiser.
TEMP_WRITE_FAILED = "Could not write the temporary HTML document."
PDF_WRITE_FAILED = "Could not save the PDF to the destination."
LOAD_FAILED = "The rendering engine failed to load the document."
PDF_ENGINE_FAILED = "The rendering engine failed to export the PDF."
ENGINE_BUSY = "The rendering engine is already converting a document."
MAIN_THREAD_ONLY = "This rendering engine can only be used from the main thread."
NO_ENGINE = "No PDF engine available (IronPDF/WebEngine init failed)."
TIMED_OUT = "The rendering engine did not finish in time."
CLEANUP_FAILED = "Could not remove the temporary HTML document."
__all__ = [
    "TEMP_WRITE_FAILED", "PDF_WRITE_FAILED", "LOAD_FAILED", "PDF_ENGINE_FAILED",
    "ENGINE_BUSY", "MAIN_THREAD_ONLY", "NO_ENGINE", "TIMED_OUT", "CLEANUP_FAILED",
]
