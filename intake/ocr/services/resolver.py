from typing import Optional, Sequence

from intake.vision.services.geometry import squared_distance

from .recognizer import RecognizedWord


def nearest_text(words: Sequence[RecognizedWord], label: RecognizedWord) -> Optional[str]:
    """
    Texte du mot le plus proche (distance euclidienne au carré entre ancres).
    Les mots à distance 0 sont exclus (le label lui-même, et tout mot posé
    exactement au même point). Égalité => le premier dans l'ordre de `words`.
    """
    best_text = None
    best_d = None
    for w in words:
        d = squared_distance(w.anchor, label.anchor)
        if d == 0:
            continue
        if best_d is None or d < best_d:
            best_d, best_text = d, w.text
    return best_text
