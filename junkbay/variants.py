VARIANT_PREFIX = "variant."


def variant_key(key):
    return f"{VARIANT_PREFIX}{key}"


def pick_variant(session, key, options):
    """
    Round-robin through options, keyed per phrase family.
    Zero or one option is returned as-is and the counter is left alone.
    """
    if not options:
        return ""
    if len(options) == 1:
        return options[0]

    full_key = variant_key(key)
    index = session.seen(full_key) % len(options)
    session.bump(full_key)
    return options[index]
