"""Session state owned by the composing window and passed by reference."""

from core.resolver import OpenDocument


class AppState:
    """Open program sources (tab order) and the program currently in focus."""

    def __init__(self):
        self.open_documents = []
        self.active_program = None

    def open_document(self, path):
        """Track a document; reopening an already open path is a no-op."""
        doc = OpenDocument(path)
        if doc not in self.open_documents:
            self.open_documents.append(doc)
        if doc.is_program:
            self.active_program = doc.file_name
        return doc

    def close_document(self, path):
        doc = OpenDocument(path)
        if doc in self.open_documents:
            self.open_documents.remove(doc)
        if self.active_program and not any(
            d.file_name == self.active_program for d in self.open_documents
        ):
            self.active_program = None

    def snapshot_documents(self):
        """Return an immutable snapshot of open documents in tab order."""
        return tuple(self.open_documents)
