"""Address splitting, node escaping and the default stringprep profile.

Attributes:
    parsing: [split_jid()][jidkit.utils.parsing.split_jid] locates the
        ``@`` and ``/`` separators without normalizing; the tolerant
        [jids_from_strings()][jidkit.utils.parsing.jids_from_strings] skips
        invalid addresses in a batch.
    escaping: XEP-0106 node escaping,
        [escape_node()][jidkit.utils.escaping.escape_node] and
        [unescape_node()][jidkit.utils.escaping.unescape_node].
    profiles: [apply_profile()][jidkit.utils.profiles.apply_profile], the
        default profile function, backed by Twisted's ``xmpp_stringprep``.

Note:
    The utils layer never imports [jidkit.models.jid][jidkit.models.jid] at
    module level; only [jidkit.models.constants][jidkit.models.constants]
    and [jidkit.core.exceptions][jidkit.core.exceptions].

Examples:
    ```python
    from jidkit.utils.escaping import escape_node
    from jidkit.utils.parsing import split_jid
    ```
"""
