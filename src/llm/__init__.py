from src.llm.factory import (
    get_writing_llm,
    clear_llm_cache,
)
