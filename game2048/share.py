"""Score sharing message."""


def share_message(score: int, url: str = '') -> str:
    """
    Build the message offered to the player once the game is over.

    Parameters
    ----------
    score : int
        Final score.
    url : str, optional
        Link appended to the message, skipped when empty.

    Returns
    -------
    str
        Text such as ``"I scored 1024 in 2048! https://example.org"``.
    """
    message = f'I scored {score} in 2048!'
    if url:
        message = f'{message} {url}'
    return message
