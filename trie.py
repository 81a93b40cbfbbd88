from typing import Iterator


class Node:
    def __init__(self):
        """
        This method initializes a node in the trie.
        It sets 'end' attribute to False, signifying that the current node is not the end of a word.
        It also sets 'children' as an empty dictionary mapping a single character to its child node.
        """
        self.end = False
        self.children = {}


class Trie:
    def __init__(self):
        """
        This method initializes the Trie (the root of it to be specific).
        It sets 'root' as a new Node, which stands for the empty prefix.
        """
        self.root = Node()

    def insert(self, word: str) -> None:
        """
        This method inserts a word into the Trie.
        It iteratively creates nodes for each missing character in the word and
        sets the 'end' attribute of the final character's node as True.
        Characters are stored as given, so matching is case-sensitive.
        Inserting the empty string marks the root itself as the end of a word.

        :param word: The word to be inserted into the Trie
        """
        cur = self.root
        for c in word:
            if c not in cur.children:
                cur.children[c] = Node()
            cur = cur.children[c]
        cur.end = True

    def autocomplete(self, prefix: str) -> Iterator[str]:
        """
        This method finds all words in the Trie that start with a given prefix.
        Words are yielded in lexicographic order; the prefix itself comes first
        if it was inserted as a word.

        :param prefix: The prefix used to autocomplete
        :return: Yields all words in the Trie starting with the given prefix
        """
        cur = self.root
        # starting at the root
        # traverse the trie for each
        # character in `prefix`
        for c in prefix:
            cur = cur.children.get(c)
            if cur is None:  # no word starts with this prefix
                return

        # depth-first walk with an explicit stack, children pushed in
        # reverse order so the smallest character is popped first
        stack = [(prefix, cur)]
        while stack:
            word, node = stack.pop()
            if node.end:
                yield word
            for letter in sorted(node.children, reverse=True):
                stack.append((word + letter, node.children[letter]))

    def search(self, prefix: str) -> list:
        """
        This method returns the list of complete words starting with the given prefix.

        :param prefix: The prefix to look up
        :return: List of matching words, empty if there are none
        """
        return list(self.autocomplete(prefix))
