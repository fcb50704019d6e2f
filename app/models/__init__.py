from app.models.translation import TranslationRequest, TranslationResult

__all__ = ['TranslationRequest', 'TranslationResult']
