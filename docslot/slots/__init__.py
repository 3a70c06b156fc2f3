"""
Backing slots: the byte stores a :class:`~docslot.collection.Collection` persists its snapshot in. Contains a base class
for the slot behavior, as well as subclasses which allow process memory, the local file system, AWS S3 or Google Cloud
Storage to be used as the storage back-end. The cloud slots require the ``aws`` and ``gcp`` extras respectively, which
can be installed in this way:

.. code-block::

   pip install docslot[aws,gcp]
"""
