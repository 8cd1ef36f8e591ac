"""Linked-list structures: an unrolled linked list and circular list splitting."""