# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import equal_to
from hamcrest.core.base_matcher import BaseMatcher

class ComposedMatcher (BaseMatcher):
    """Match by checking (actual, matcher, label) triples in order.

    Subclasses define assertion(item) to yield the triples; the first
    failing one is what gets described.
    """

    failure = None

    def _matches (self, item):
        self.failure = None

        for actual, matcher, label in self.assertion(item):
            if not matcher.matches(actual):
                self.failure = (actual, matcher, label)
                return False

        return True

    def describe_to (self, description):
        if self.failure is None:
            description.append_text(self.__class__.__name__)

        else:
            actual, matcher, label = self.failure
            description.append_text("{} ".format(label))
            matcher.describe_to(description)

    def describe_mismatch (self, item, description):
        actual, matcher, label = self.failure
        matcher.describe_mismatch(actual, description)

class renders_as (BaseMatcher):

    def __init__ (self, expected):
        self.expected = expected

    def _matches (self, item):
        return str(item) == self.expected

    def describe_to (self, description):
        description.append_text("an object shown as ") \
                .append_description_of(self.expected)

    def describe_mismatch (self, item, description):
        description.append_text("was shown as ") \
                .append_description_of(str(item))

class an_entry (ComposedMatcher):
    """Match an IFD entry by its tag name and how its value shows."""

    def __init__ (self, name, text):
        self.name = name
        self.text = text

    def assertion (self, item):
        yield item.tag.name, equal_to(self.name), "tag named"
        yield str(item.value), equal_to(self.text), "value shown as"

class an_ifd (ComposedMatcher):
    """Match an IFD by its directory kind and its tags, in order."""

    def __init__ (self, directory, *names):
        self.directory = directory
        self.names = list(names)

    def assertion (self, item):
        yield item.directory, equal_to(self.directory), "directory"
        yield [tag.name for tag, value in item.items()], \
                equal_to(self.names), "tags"

class evaluates_to (BaseMatcher):

    def __init__ (self, expected):
        self.expected = expected

    def _matches (self, item):
        return self.__get_bool_for(item) == self.expected

    def describe_to (self, description):
        description.append_text("an object with {} truthiness".format(
                repr(self.expected)))

    def describe_mismatch (self, item, description):
        actual = self.__get_bool_for(item)

        if actual is None:
            description.append_text("no truthiness ") \
                    .append_description_of(item)

        else:
            description.append_text("was {} ".format(actual)) \
                    .append_description_of(item)

    def __get_bool_for (self, item):
        try:
            result = bool(item)
            if result is True or result is False:
                return result

        except Exception:
            pass
