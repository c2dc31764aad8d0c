"""AI/ML engineer patterns: ML frameworks, LLM tooling, training and inference."""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

AI_ML_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"pytorch|tensorflow|keras|jax", 0.95, "ML Framework"),
    intent(r"hugging\s*face|transformers|diffusers", 0.95, "HuggingFace"),
    intent(r"langchain|llama.?index|llamaindex", 0.95, "LLM Framework"),
    intent(r"openai\s*(api|sdk)|anthropic\s*(api|sdk)", 0.95, "LLM API"),
    intent(r"machine\s*learning|ML\s*(모델|model|파이프라인|pipeline)", 0.9, "Machine Learning"),
    intent(r"딥\s*러닝|deep\s*learning|신경망|neural\s*network", 0.9, "Deep Learning"),
    intent(r"모델\s*학습|train.*model|fine.?tun|파인\s*튜닝", 0.9, "Model Training"),
    intent(r"RAG|retrieval.*augment|검색\s*증강", 0.9, "RAG"),
    intent(r"프롬프트\s*엔지니어링|prompt\s*engineer", 0.9, "Prompt Engineering"),
    intent(r"LLM\s*(개발|develop|구현|implement|통합|integrat)", 0.9, "LLM Development"),
    intent(r"임베딩|embedding|벡터\s*(DB|database|저장)", 0.85, "Embeddings"),
    intent(r"추론|inference|predict|예측\s*모델", 0.85, "Inference"),
    intent(r"AI\s*(모델|model|에이전트|agent|챗봇|chatbot)", 0.85, "AI Model/Agent"),
    intent(r"자연어\s*처리|NLP|텍스트\s*분석", 0.85, "NLP"),
    intent(r"컴퓨터\s*비전|computer\s*vision|이미지\s*인식", 0.85, "Computer Vision"),
)
