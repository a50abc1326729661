"""Keyword-to-blog-article generator backed by the Anthropic Claude API.

Package structure:
    blogwriter/config.py        – paths, env var names, model settings, prompt markers
    blogwriter/models.py        – request, search intent, outline and article records
    blogwriter/errors.py        – error taxonomy and upstream-failure guidance
    blogwriter/loaders/         – prompt template store and placeholder rendering
    blogwriter/keywords/        – keyword sources (Rakko Keyword API, Google Suggest)
    blogwriter/pipeline/        – prompts, Claude API adapter, parsers, 7-step orchestration
    blogwriter/web/             – Flask blueprint for the HTTP API
    blogwriter/cache.py         – JSON cache of generated articles
    blogwriter/export.py        – Markdown / HTML rendering of an article
"""
