"""Views of the parsed exception tree

The parsed tree can be interpreted in several ways:

    1. As a coloured **tree** of the exception chain with its frames (:mod:`monotrace.view.text`).

    2. As a **table** of all the frames, formatted by the tabulate_ library
       (:mod:`monotrace.view.table`).

    3. As plain dictionaries, which can be dumped as **yaml** or **json**
       (:mod:`monotrace.view.convert`).

    4. As the textual **mono** dump, i.e. in the same format as the parsed input
       (:mod:`monotrace.view.text`).

.. _tabulate: https://pypi.org/project/tabulate/
"""
