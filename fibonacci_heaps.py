'''
    Fibonacci heaps over integer keys with lazy or eager melds and
    lazy or eager decrease-keys, instrumented with structural counters.

    Two orthogonal construction-time choices select the behavior:

      - lazy_melds=True concatenates root lists in O(1) and defers
        consolidation to delete_min, lazy_melds=False consolidates by
        successive linking after every meld (and after every cut).
      - lazy_decrease_keys=True decreases keys by cuts and cascading cuts
        (Fibonacci heaps), lazy_decrease_keys=False sifts the item up by
        swapping items between nodes (lazy binomial heaps).

    The heap counts links, cuts, marked nodes and sift-up swaps, so the
    four variants can be compared experimentally. A set of assertions in
    Heap.validate() checks the structural integrity of the data structure.
'''


import math
import random
import time


PHI = (1 + math.sqrt(5)) / 2  # rank of a tree of size n is <= log_phi(n)


class Heap:
    '''Meldable heap of Item handles with integer keys.

    The class supports the following operations:

      - Heap(lazy_melds, lazy_decrease_keys) creates an empty heap.
      - H.empty() returns if the heap H is empty.
      - H.find_min() returns the item in H with minimum key (None if empty).
      - H.insert(key, info) creates an item (key, info) in H and returns it.
      - H.delete_min() deletes the item with minimum key from H.
      - H.decrease_key(x, diff) decreases the key of item x by diff.
      - H.delete(x) deletes item x from H.
      - H1.meld(H2) moves all items of H2 into H1. H2 is retired.

    The counters H.size(), H.num_trees(), H.num_marked_nodes(),
    H.total_links(), H.total_cuts() and H.total_heapify_costs() report the
    current shape and the accumulated work of the heap.

    find_min, decrease_key (eager) and meld (lazy) take worst-case O(1)
    and O(log n) time. delete_min, delete, eager meld and cascading cuts
    can take linear time in the worst case, but amortized O(log n).
    '''

    def __init__(self, lazy_melds=True, lazy_decrease_keys=True,
                 positive_keys=False):
        '''Initialize a new empty heap.'''

        self.lazy_melds = lazy_melds
        self.lazy_decrease_keys = lazy_decrease_keys
        self.positive_keys = positive_keys
        self._meld_strategy = LazyMeld() if lazy_melds else EagerMeld()
        if lazy_decrease_keys:
            self._decrease_key_strategy = CutDecreaseKey()
        else:
            self._decrease_key_strategy = SiftDecreaseKey()
        self._active = True
        self._melded_into = None
        self._min = None
        self._first_root = None
        self._size = 0
        self._num_trees = 0
        self._num_marked = 0
        self._total_links = 0
        self._total_cuts = 0
        self._total_heapify_costs = 0

    def __len__(self):
        return self._size

    def __repr__(self):
        return (f'{self.__class__.__name__}(lazy_melds={self.lazy_melds}, '
                f'lazy_decrease_keys={self.lazy_decrease_keys}, '
                f'size={self._size})')

    def empty(self):
        '''Return if heap is empty.'''

        return self._size == 0

    def find_min(self):
        '''Return the item with smallest key, None if the heap is empty.'''

        return self._min

    def insert(self, key, info=None):
        '''Insert new (key, info) item into heap and return the item.'''

        self.check_active()
        if not isinstance(key, int) or isinstance(key, bool):
            raise TypeError(f'key must be an integer, not {key!r}')
        lowest = 1 if self.positive_keys else 0
        if key < lowest:
            raise ValueError(f'key must be at least {lowest}, got {key}')

        item = Item(key, info)
        item._heap = self
        singleton = Heap(self.lazy_melds, self.lazy_decrease_keys,
                         self.positive_keys)
        singleton._first_root = Node(item)
        singleton._min = item
        singleton._size = 1
        singleton._num_trees = 1
        self.meld(singleton)
        return item

    def meld(self, other):
        '''Move all items of other into this heap. Returns this heap.

        The other heap is left empty and retired, any later update of it
        raises RuntimeError.
        '''

        self.check_active()
        other.check_active()
        if other is self:
            raise ValueError('cannot meld a heap with itself')
        if (other.lazy_melds != self.lazy_melds or
                other.lazy_decrease_keys != self.lazy_decrease_keys):
            raise ValueError(f'cannot meld {other!r} into {self!r}, '
                             'the heaps use different strategies')

        if other._size == 0:
            return self
        if self._size == 0:
            # Adopt structure of other, add its history to ours
            self._first_root = other._first_root
            self._min = other._min
            self._size = other._size
            self._num_trees = other._num_trees
            self._num_marked = other._num_marked
            self._total_links += other._total_links
            self._total_cuts += other._total_cuts
            self._total_heapify_costs += other._total_heapify_costs
            other.retire(self)
            return self

        self._size += other._size
        self._num_trees += other._num_trees
        self._num_marked += other._num_marked
        self._total_links += other._total_links
        self._total_cuts += other._total_cuts
        self._total_heapify_costs += other._total_heapify_costs
        self._first_root = Node.concatenate(self._first_root,
                                            other._first_root)
        if other._min._key < self._min._key:
            self._min = other._min
        other.retire(self)
        self._meld_strategy.after_meld(self)
        return self

    def delete_min(self):
        '''Delete the item with minimum key. No-op on an empty heap.'''

        self.check_active()
        if self._min is None:
            return

        root = self._min._node
        if self._size == 1:
            assert root._child is None
            # Historical counters survive emptying the heap
            self._first_root = None
            self._min = None
            self._size = 0
            self._num_trees = 0
            self._num_marked = 0
        else:
            self.remove_root(root)
            self._size -= 1
            self._num_trees -= 1
            self.promote_children(root)
            self.consolidate()
        root.retire()

    def decrease_key(self, item, diff):
        '''Decrease the key of item by diff, where 0 <= diff <= key.'''

        self.check_active()
        if item is None or item.deleted():
            return
        assert self.owns(item)
        if not isinstance(diff, int) or isinstance(diff, bool):
            raise TypeError(f'diff must be an integer, not {diff!r}')
        if not 0 <= diff <= item._key:
            raise ValueError(f'diff must be in [0, {item._key}], got {diff}')

        item._key -= diff
        node = item._node
        parent = node._parent
        if parent is None or parent.key() <= item._key:
            if parent is None and item._key < self._min._key:
                self._min = item
            return
        self._decrease_key_strategy.restore_order(self, node)
        if item._node._parent is None and item._key < self._min._key:
            self._min = item

    def delete(self, item):
        '''Delete item from the heap. No-op for a deleted item.'''

        self.check_active()
        if item is None or item.deleted() or self._min is None:
            return
        assert self.owns(item)
        if item is self._min:
            self.delete_min()
            return

        # Move item to a root as if its key was minus infinity
        node = self._decrease_key_strategy.force_to_root(self, item._node)

        assert node._parent is None
        assert node._item is item

        self._min = item
        self.delete_min()

    ##################################################################
    #                           Counters
    ##################################################################

    def size(self):
        '''Return the number of items in the heap.'''

        return self._size

    def num_trees(self):
        '''Return the number of trees in the root list.'''

        return self._num_trees

    def num_marked_nodes(self):
        '''Return the number of marked nodes.'''

        return self._num_marked

    def total_links(self):
        '''Return the number of links performed since creation.'''

        return self._total_links

    def total_cuts(self):
        '''Return the number of cuts performed since creation.'''

        return self._total_cuts

    def total_heapify_costs(self):
        '''Return the number of sift-up swaps performed since creation.'''

        return self._total_heapify_costs

    def roots(self):
        '''Generator to return all roots of the heap.'''

        if self._first_root is not None:
            yield from self._first_root.siblings()

    def all_nodes(self):
        '''Generator to yield all nodes of the heap.'''

        for root in self.roots():
            yield from root.all_nodes()

    ##################################################################
    #                      Heap record lifecycle
    ##################################################################

    def owns(self, item):
        '''Return if the live item is stored in this heap.'''

        heap = item._heap
        while heap._melded_into is not None:
            heap = heap._melded_into
        item._heap = heap
        return heap is self

    def check_active(self):
        '''Raise RuntimeError if this heap has been melded into another.'''

        if not self._active:
            raise RuntimeError('heap has been melded into another heap')

    def retire(self, heap):
        '''Make this heap empty and unusable, its nodes moved to heap.'''

        self._active = False
        self._melded_into = heap
        self._min = None
        self._first_root = None
        self._size = 0
        self._num_trees = 0
        self._num_marked = 0
        self._total_links = 0
        self._total_cuts = 0
        self._total_heapify_costs = 0

    ##################################################################
    #                           Root list
    ##################################################################

    def remove_root(self, root):
        '''Unlink root from the root list.'''

        assert root._parent is None

        if self._first_root is root:
            self._first_root = None if root._next is root else root._next
        root.remove()

    def promote_children(self, node):
        '''Move all children of node to the root list (not counted as cuts).'''

        child = node._child
        if child is None:
            return
        for c in node.children():
            c._parent = None
            if c._marked:
                c._marked = False
                self._num_marked -= 1
        self._num_trees += node._rank
        node._child = None
        node._rank = 0
        self._first_root = Node.concatenate(self._first_root, child)

    ##################################################################
    #                   Consolidation (successive linking)
    ##################################################################

    def consolidate(self):
        '''Link trees of equal rank until all roots have distinct ranks.'''

        if self._first_root is None:
            self._min = None
            self._num_trees = 0
            return

        buckets = [None] * (math.ceil(math.log(self._size, PHI)) + 2)
        self.to_buckets(buckets)
        self.from_buckets(buckets)

    def to_buckets(self, buckets):
        '''Distribute roots into buckets by rank, linking on collisions.'''

        x = self._first_root
        x._prev._next = None  # break the circular root list
        while x is not None:
            y = x
            x = x._next
            y._next = y._prev = y
            while True:
                if y._rank >= len(buckets):
                    buckets.extend([None] * (y._rank + 1 - len(buckets)))
                other = buckets[y._rank]
                if other is None:
                    break
                buckets[y._rank] = None
                y = self.link(y, other)
            buckets[y._rank] = y

    def from_buckets(self, buckets):
        '''Rebuild the root list from the buckets and find the minimum.'''

        first = None
        self._num_trees = 0
        for root in buckets:
            if root is None:
                continue

            assert root._parent is None
            assert not root._marked

            if first is None:
                first = root
            else:
                first.insert_after(root)
                if root.key() < first.key():
                    first = root
            self._num_trees += 1
        self._first_root = first
        self._min = first._item

    def link(self, x, y):
        '''Link two roots x and y of equal rank. Return the new root.'''

        assert x is not y
        assert x._rank == y._rank
        assert x._parent is None and y._parent is None

        if y.key() < x.key():
            x, y = y, x
        if y._marked:
            y._marked = False
            self._num_marked -= 1
        x.add_child(y)
        self._total_links += 1
        return x

    ##################################################################
    #                  Cuts (lazy decrease-key mode)
    ##################################################################

    def cut(self, node):
        '''Cut node from its parent and make it a root. Returns old parent.'''

        parent = node._parent

        assert parent is not None
        assert self._first_root is not None

        if parent._child is node:
            parent._child = None if node._next is node else node._next
        node.remove()
        parent._rank -= 1
        node._parent = None
        if node._marked:
            node._marked = False
            self._num_marked -= 1
        self._first_root.insert_after(node)
        self._num_trees += 1
        self._total_cuts += 1
        if node.key() < self._min._key:
            self._min = node._item
        return parent

    def cascading_cut(self, node):
        '''Mark node, or cut it if already marked and continue upwards.'''

        while node._parent is not None:
            if not node._marked:
                node._marked = True
                self._num_marked += 1
                return
            node = self.cut(node)

    ##################################################################
    #                 Sift-up (eager decrease-key mode)
    ##################################################################

    def sift_up(self, node, force=False):
        '''Swap the item of node upwards while smaller than its parent.

        With force=True the item moves all the way to the root. Returns
        the node now holding the item.
        '''

        swaps = 0
        parent = node._parent
        while parent is not None and (force or node.key() < parent.key()):
            node.swap_items(parent)
            swaps += 1
            node = parent
            parent = node._parent
        self._total_heapify_costs += swaps
        return node

    ##################################################################
    #                      Validation methods
    ##################################################################

    def validate(self):
        '''Validate all heap structure and invariants.'''

        def validate_tree(node, parent=None):
            '''Recursive validate tree nodes.'''

            # Validate parent pointer
            assert node._parent is parent
            # Validate node-item back pointers
            assert node._item is not None
            assert node._item._node is node
            # Validate heap order
            if parent is not None:
                assert parent.key() <= node.key()
            else:
                assert not node._marked  # roots are never marked
            if not self.lazy_decrease_keys:
                assert not node._marked
            # Validate sibling pointers (cyclic linked list)
            assert node is node._next._prev
            assert node is node._prev._next
            # Validate rank
            children = list(node.children())
            assert node._rank == len(children)
            assert (node._child is None) == (node._rank == 0)
            for child in children:
                validate_tree(child, node)

        heap = self
        assert heap._total_links >= 0
        assert heap._total_cuts >= 0
        assert heap._total_heapify_costs >= 0
        if heap._size == 0:
            assert heap._first_root is None
            assert heap._min is None
            assert heap._num_trees == 0
            assert heap._num_marked == 0
        else:
            roots = list(heap.roots())
            assert len(roots) == heap._num_trees
            for root in roots:
                validate_tree(root)
            nodes = list(heap.all_nodes())
            assert len(nodes) == heap._size
            assert sum(node._marked for node in nodes) == heap._num_marked
            assert not heap._min.deleted()
            assert heap._min._node._parent is None
            assert heap._min._key == min(root.key() for root in roots)

    ##################################################################
    #                        Save heap as LaTeX
    ##################################################################

    def latex(self, filename='heap_figure.tex', show_keys=False):
        '''Save the forest as a LaTeX figure using the forest package.'''

        heap = self

        assert heap._active
        assert heap._first_root is not None

        def traverse(node, indent=0):
            '''Convert subtree rooted at node to Latex with indentation.'''

            key = str(node.key()) if show_keys else ''
            txt = r'\NODE{' + str(node._rank) + r'}{' + key + '}'
            txt += ', marked' if node._marked else ', unmarked'
            if node._child is None:
                txt = ' ' * indent + '[ ' + txt + ' ]\n'
            else:
                txt = ' ' * indent + '[ ' + txt + '\n'
                for child in node.children():
                    txt += traverse(child, indent + 2)
                txt += ' ' * indent + ']\n'
            return txt

        # Roots hang from an invisible phantom node
        forest = '[, phantom\n'
        for root in heap.roots():
            forest += traverse(root, 2)
        forest += ']\n'

        txt = r'''\documentclass[margin=15pt]{standalone}
\usepackage{forest}
\begin{document}
\forestset{forest circles/.style={
    for tree={math content, draw, circle,
      inner sep=0pt, outer sep=0cm, anchor=center,
      l=25pt, s sep=20pt, edge=solid, minimum size=16pt,
      font=\scriptsize},
    marked/.style={fill=black!15},
    unmarked/.style={}
  }
}
\newcommand{\NODE}[2]{\makebox[0cm][c]{#1}\rlap{\hspace{1.5em}\tiny #2}}
\begin{forest}
  forest circles,
''' + forest + r'''\end{forest}
\end{document}
'''
        with open(filename, 'w') as file:
            print(txt, file=file)


######################################################################
#                            Strategies
######################################################################


class LazyMeld:
    '''Meld by concatenating root lists, consolidate only in delete_min.'''

    def after_meld(self, heap):
        pass

    def after_cut(self, heap):
        pass


class EagerMeld:
    '''Consolidate after every meld and after every cut.'''

    def after_meld(self, heap):
        heap.consolidate()

    def after_cut(self, heap):
        heap.consolidate()  # a cut melds a new tree into the root list


class CutDecreaseKey:
    '''Fibonacci heap decrease-key: move the node with its subtree.'''

    def restore_order(self, heap, node):
        '''Cut node violating heap order and cascade from its old parent.'''

        parent = heap.cut(node)
        heap.cascading_cut(parent)
        heap._meld_strategy.after_cut(heap)
        return node

    def force_to_root(self, heap, node):
        '''Cut node even without an order violation. Returns node.'''

        # No consolidation here with eager melds, delete_min follows and
        # must find node still a root
        if node._parent is not None:
            heap.cascading_cut(heap.cut(node))
        return node


class SiftDecreaseKey:
    '''Lazy binomial heap decrease-key: move the item, keep the shape.'''

    def restore_order(self, heap, node):
        return heap.sift_up(node)

    def force_to_root(self, heap, node):
        return heap.sift_up(node, force=True)


######################################################################
#                          Item records
######################################################################


class Item:
    '''A handle for an item (key, info) returned by Heap.insert.'''

    def __init__(self, key, info=None):
        self._key = key
        self._info = info
        self._node = None
        self._heap = None  # heap the item was inserted into

    def __repr__(self):
        return f'{self.__class__.__name__}(key={self._key!r}, info={self._info!r})'

    def key(self):
        '''Return the current key of the item.'''

        return self._key

    def info(self):
        return self._info

    def node(self):
        '''Return the node currently holding the item (None if deleted).'''

        return self._node

    def item(self):
        '''Return the pair (key, info).'''

        return (self._key, self._info)

    def deleted(self):
        '''Return if the item has been deleted from its heap.'''

        return self._node is None


######################################################################
#                           Node records
######################################################################


class Node:
    '''A tree node holding exactly one item.'''

    def __init__(self, item):
        '''Create a root node of rank zero holding item.'''

        assert item._node is None

        self._item = item
        item._node = self
        # tree structure
        self._parent = None
        self._child = None
        self._next = self  # no sibling
        self._prev = self  # no sibling
        # state
        self._rank = 0
        self._marked = False

    def __repr__(self):
        return (f'{self.__class__.__name__}(key={self.key()!r}, '
                f'rank={self._rank}, marked={self._marked})')

    def retire(self):
        '''Disconnect this single node and its item from the heap.'''

        assert self._parent is None
        assert self._child is None
        assert self._next is self._prev is self

        self._item._node = None
        self._item = None

    #######################################################
    # Methods for accessing the state of a node

    def key(self):
        return self._item._key

    def item(self):
        return self._item

    def siblings(self):
        '''Generator to return this node and all nodes on its list.'''

        node = self
        yield node
        while node._next is not self:
            node = node._next
            yield node

    def children(self):
        '''Generator to return all children of node.'''

        if self._child is not None:
            yield from self._child.siblings()

    def all_nodes(self):
        '''Generator to yield all nodes in subtree rooted at node.'''

        yield self
        for child in self.children():
            yield from child.all_nodes()

    def height(self):
        '''Return height of subtree rooted at node.'''

        return 1 + max((child.height() for child in self.children()), default=0)

    #######################################################
    # Circular lists

    @staticmethod
    def concatenate(a, b):
        '''Splice the circular lists of a and b. Returns a list member.'''

        if a is None:
            return b
        if b is None:
            return a
        a_next = a._next
        b_prev = b._prev
        a._next = b
        b._prev = a
        b_prev._next = a_next
        a_next._prev = b_prev
        return a

    def remove(self):
        '''Unlink node from its list, leaving it as a singleton list.'''

        self._prev._next = self._next
        self._next._prev = self._prev
        self._next = self
        self._prev = self

    def insert_after(self, other):
        '''Insert the singleton other after this node.'''

        assert other._next is other
        assert other._prev is other

        other._next = self._next
        other._prev = self
        self._next._prev = other
        self._next = other

    #######################################################
    # Methods for modifying the state of a node

    def add_child(self, child):
        '''Add the root child to the children of this node.'''

        assert child._parent is None
        assert child._next is child

        child._parent = self
        if self._child is None:
            self._child = child
        else:
            self._child.insert_after(child)
        self._rank += 1

    def swap_items(self, other):
        '''Exchange the items of two nodes, keeping back pointers valid.'''

        self._item, other._item = other._item, self._item
        self._item._node = self
        other._item._node = other


######################################################################
#                          Test methods
######################################################################


MODES = [(lazy_melds, lazy_decrease_keys)
         for lazy_melds in (True, False)
         for lazy_decrease_keys in (True, False)]


def swap(L, i, j):
    '''Swap entries L[i] and L[j].'''

    L[i], L[j] = L[j], L[i]


def pop_random(L):
    '''Remove a random element from L (by swapping with last element).'''

    swap(L, -1, random.randint(0, len(L) - 1))
    return L.pop()


def random_items(n, distinct_keys=False):
    '''Returns a list of n random (key, info) items (info=42).'''

    if distinct_keys:
        return [(key, 42) for key in random.sample(range(1, 3 * n), n)]
    else:
        return [(random.randint(1, n), 42) for _ in range(n)]


def delete_all(heap):
    '''Create sorted list of keys from heap by calling n x delete_min.'''

    keys = []
    while not heap.empty():
        item = heap.find_min()
        heap.validate()
        keys.append(item.key())
        heap.delete_min()
        heap.validate()
    heap.validate()
    return keys


def check_sorting_insert(n, lazy_melds=True, lazy_decrease_keys=True):
    '''Sort using n x insert and n x delete_min.'''

    items = random_items(n)
    heap = Heap(lazy_melds, lazy_decrease_keys)
    heap.validate()
    for key, info in items:
        heap.insert(key, info)
        heap.validate()
    assert delete_all(heap) == sorted(key for key, info in items)


def check_sorting_meld(n, lazy_melds=True, lazy_decrease_keys=True):
    '''Sort using (n - 1) x meld in random order and n x delete_min.'''

    items = random_items(n)
    heaps = []
    # Create n heaps with one item
    for key, info in items:
        heap = Heap(lazy_melds, lazy_decrease_keys)
        heap.insert(key, info)
        heap.validate()
        heaps.append(heap)
    # Repeatedly meld two random heaps until one heap remains
    while len(heaps) >= 2:
        heap1 = pop_random(heaps)
        heap2 = pop_random(heaps)
        heap = heap1.meld(heap2)
        heap.validate()
        heaps.append(heap)
    heap = heaps.pop()
    assert delete_all(heap) == sorted(key for key, info in items)


def check_sorting_decreasekey(n, lazy_melds=True, lazy_decrease_keys=True):
    '''Sort using n x decrease_key and n x delete_min.'''

    items = random_items(n)
    heap = Heap(lazy_melds, lazy_decrease_keys)
    handles = []
    # Create heap with n items each with the same large key
    for key, info in items:
        handles.append((heap.insert(n + 1, info), key))
    # Consolidate once so there are trees to cut from
    heap.insert(0)
    heap.delete_min()
    heap.validate()
    # Decrease keys to the items real value
    random.shuffle(handles)
    for item, key in handles:
        heap.decrease_key(item, item.key() - key)
        heap.validate()
    assert delete_all(heap) == sorted(key for key, info in items)


def check_sorting_sample(n, lazy_melds=True, lazy_decrease_keys=True,
                         delete_probability=0.5):
    '''Sort n items with a sample removed using delete.'''

    items = random_items(n)
    heap = Heap(lazy_melds, lazy_decrease_keys)
    handles = []
    for key, info in items:
        handles.append((heap.insert(key, info), key))
    heap.insert(0)
    heap.delete_min()
    heap.validate()
    random.shuffle(handles)
    # Remove sample
    keys = []  # not deleted keys
    for item, key in handles:
        if random.random() < delete_probability:
            heap.delete(item)
            heap.validate()
            assert item.deleted()
        else:
            keys.append(key)
    assert delete_all(heap) == sorted(keys)


def check_sorting(n, repeats):
    '''Run all sorting checks for all four modes.'''

    print('Sorting n =', n, end=' ', flush=True)
    for _ in range(1, repeats + 1):
        print('.', end='', flush=True)
        for lazy_melds, lazy_decrease_keys in MODES:
            check_sorting_insert(n, lazy_melds, lazy_decrease_keys)
            check_sorting_meld(n, lazy_melds, lazy_decrease_keys)
            check_sorting_decreasekey(n, lazy_melds, lazy_decrease_keys)
            check_sorting_sample(n, lazy_melds, lazy_decrease_keys)
    print()


def check_random_operations(n, lazy_melds=True, lazy_decrease_keys=True,
                            verbose=True):
    '''Check a random sequence of n heap operations.'''

    if verbose:
        print(n, 'random heap operations ', end='', flush=True)
    heaps = []
    for iteration in range(1, n + 1):
        if verbose and iteration % 100 == 0:
            print('.', end='', flush=True)
        p = random.random()
        if len(heaps) == 0 or p < 0.05:  # new heap
            heap = Heap(lazy_melds, lazy_decrease_keys)
            heaps.append((heap, []))
            heap.validate()
        elif p < 0.1:  # meld
            if len(heaps) >= 2:
                heap1, S1 = pop_random(heaps)
                heap2, S2 = pop_random(heaps)
                heap = heap1.meld(heap2)
                heaps.append((heap, S1 + S2))
                heap.validate()
        elif p < 0.4:  # decrease_key
            heap, S = random.choice(heaps)
            if not heap.empty():
                item = random.choice(list(heap.all_nodes())).item()
                key = item.key()
                diff = random.randint(0, min(key, 25))
                heap.decrease_key(item, diff)
                S.remove(key)
                S.append(key - diff)
                heap.validate()
        elif p < 0.5:  # delete
            heap, S = random.choice(heaps)
            if not heap.empty():
                item = random.choice(list(heap.all_nodes())).item()
                S.remove(item.key())
                heap.delete(item)
                heap.validate()
        elif p < 0.8:  # insert
            heap, S = random.choice(heaps)
            key = random.randint(0, 100)
            heap.insert(key, 42)
            S.append(key)
            heap.validate()
        else:  # delete_min
            heap, S = random.choice(heaps)
            if not heap.empty():
                key = heap.find_min().key()
                assert key == min(S)
                S.remove(key)
                heap.delete_min()
                heap.validate()
        # Validate content of the heaps
        for heap, S in heaps:
            assert heap.size() == len(S)
            assert sorted(S) == sorted(node.key() for node in heap.all_nodes())
    if verbose:
        print(' final heap sizes:', *sorted(heap.size() for heap, S in heaps))


######################################################################
#                 Experiments comparing the strategies
######################################################################


def experiment(n, lazy_melds=True, lazy_decrease_keys=True):
    '''Measure the counters of one heap variant on n items.

    Inserts a random permutation of 1..n, deletes the minimum once, then
    decreases the keys of the n // 10 largest items to zero and deletes
    the minimum again. Returns a dict with the time and the counters.
    '''

    keys = list(range(1, n + 1))
    random.shuffle(keys)
    heap = Heap(lazy_melds, lazy_decrease_keys)
    start = time.perf_counter()
    items = [heap.insert(key) for key in keys]
    heap.delete_min()
    largest = sorted(items, key=Item.key, reverse=True)[:n // 10]
    for item in largest:
        heap.decrease_key(item, item.key())
    heap.delete_min()
    elapsed = time.perf_counter() - start

    return {
        'n': n,
        'lazy_melds': lazy_melds,
        'lazy_decrease_keys': lazy_decrease_keys,
        'time_ms': 1000 * elapsed,
        'size': heap.size(),
        'trees': heap.num_trees(),
        'marked': heap.num_marked_nodes(),
        'links': heap.total_links(),
        'cuts': heap.total_cuts(),
        'heapify': heap.total_heapify_costs(),
    }


def run_experiments(sizes=(1000, 10000, 100000)):
    '''Print a table of experiment results for all four variants.'''

    columns = ['n', 'melds', 'decrease', 'time_ms', 'size', 'trees',
               'marked', 'links', 'cuts', 'heapify']
    print(''.join(f'{column:>10}' for column in columns))
    rows = []
    for n in sizes:
        for lazy_melds, lazy_decrease_keys in MODES:
            row = experiment(n, lazy_melds, lazy_decrease_keys)
            rows.append(row)
            print(f'{row["n"]:>10}'
                  f'{"lazy" if lazy_melds else "eager":>10}'
                  f'{"lazy" if lazy_decrease_keys else "eager":>10}'
                  f'{row["time_ms"]:>10.1f}'
                  f'{row["size"]:>10}{row["trees"]:>10}{row["marked"]:>10}'
                  f'{row["links"]:>10}{row["cuts"]:>10}{row["heapify"]:>10}')
    return rows


######################################################################
#                               Main
######################################################################


if __name__ == '__main__':
    check_sorting(1, 10)
    check_sorting(10, 100)
    check_sorting(100, 10)
    for lazy_melds, lazy_decrease_keys in MODES:
        check_random_operations(2000, lazy_melds, lazy_decrease_keys)
    run_experiments()
