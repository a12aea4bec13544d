"""
Basic usage example for Helpdesk RAG.
"""

from helpdesk_rag import Config, RetrievalEngine, build_citations
from helpdesk_rag.rag.context import assemble_context

# Load the knowledge base
print("Loading knowledge base...")
config = Config(default_top_k=3)
engine = RetrievalEngine.from_directory("data/", config)
print(f"Loaded {engine.get_document_count()} documents: {', '.join(engine.get_filenames())}")

for error in engine.load_errors:
    print(f"Skipped {error.name}: {error.message}")

# Search
print("\nSearching...")
results = engine.search("how do refunds work")

if not results:
    print("No information found.")

for i, result in enumerate(results, 1):
    label = " (fallback)" if engine.is_fallback(result) else ""
    print(f"\n{i}. Score: {result.score:.4f}{label}")
    print(f"   Source: {result.document.filename} #{result.passage_index}")

# Citations for the chat response
print("\nCitations...")
for citation in build_citations(results, config.citation_preview_chars):
    print(f"[{citation.filename} #{citation.passage_index}] {citation.text}")

# Context for an answer generator
print("\nContext...")
print(assemble_context(results))

# After the corpus changes (upload/delete), rebuild the index
report = engine.reindex()
print(f"\nRe-indexed {len(report.documents)} documents")
