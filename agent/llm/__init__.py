from agent.llm.factory import get_llm_client
