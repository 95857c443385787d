"""Describes the Recipe Remix domain. Centres around the `Kitchen`.

What is on the counter?

- A recipe fetched from TheMealDB. Replaced wholesale on each fetch.
- A remix of that recipe written by a large language model.
- A short list of saved recipe names, kept in a key-value store.

The external services (TheMealDB, OpenAI, the store) live behind small
clients so they can be faked.
"""
