### post-match refinement of the best chord candidate.
### the matcher works only with pitch classes, so it cannot tell a #9 from a b3,
### a #11 from a b5, or a #5 from a b13. once a best match has been chosen,
### these functions look at the actual voicing and either switch to a
### better-named candidate on the same root, or rename the best match.

from . import _settings
from .tensions import disambiguate_tensions
from .util import log, replace_first


def find_alternate(matches, best, condition, within_tolerance=True):
    """returns the first match in the ranked list that has the same root as best,
    whose name satisfies condition (a function of the name string),
    and (if within_tolerance) that scored nearly as well as best.
    returns None if there is no such match."""
    for m in matches:
        if m.root != best.root or not condition(m.name):
            continue
        if within_tolerance and not (m.score > best.score - _settings.ALTERNATE_SCORE_TOLERANCE):
            continue
        return m
    return None

def switch(best, alternate):
    log(f'Switching from {best.name!r} to alternate match {alternate.name!r} (score {best.score} -> {alternate.score})')
    return alternate


def refine_sharp9(best, matches, is_sharp9):
    """interval 3 above the root alongside a major 3rd: either a #9 tension
    (voiced above the 3rd) or a b3 cluster (voiced below it)"""
    name = best.name
    if is_sharp9:
        if '#9' not in name:
            alternate = find_alternate(matches, best, lambda n: '#9' in n)
            if alternate is not None:
                return switch(best, alternate)
            # plain shapes can be renamed to carry the #9:
            if 'm' not in name and (name == '' or name.startswith('add') or name.startswith('Maj') or name == '7'):
                return best.renamed('add#9' if name == '' else f'{name}(#9)')
    elif '#9' in name:
        if '7' not in name:
            cluster = find_alternate(matches, best, lambda n: n in ('(add b3)', 'm(add 3)'))
            if cluster is not None:
                return switch(best, cluster)
            new_name = replace_first(name, '#9', 'b3')
            new_name = replace_first(new_name, 'add', '(add ')
            new_name = replace_first(new_name, 'madd', 'm(add ')
            if '(add ' in new_name and not new_name.endswith(')'):
                new_name += ')'
            return best.renamed(new_name)
        else:
            return best.renamed(replace_first(name, '#9', '(add b3)'))
    return best

def refine_sharp11(best, matches, is_sharp11, has_perfect5):
    """interval 6 above the root: either a #11 tension, or a b5 chord tone"""
    name = best.name
    if is_sharp11:
        alternate = find_alternate(matches, best, lambda n: '#11' in n)
        if alternate is not None and '#11' not in name:
            return switch(best, alternate)
        elif 'b5' in name:
            return best.renamed(replace_first(name, 'b5', '#11'))
        elif name == '(b5)':
            fragment = find_alternate(matches, best, lambda n: n == '(#11)', within_tolerance=False)
            if fragment is not None:
                return switch(best, fragment)
    else:
        if name == '(#11)':
            fragment = find_alternate(matches, best, lambda n: n == '(b5)', within_tolerance=False)
            if fragment is not None:
                return switch(best, fragment)
            return best.renamed('(b5)')
        elif '#11' in name and not has_perfect5:
            alternate = find_alternate(matches, best, lambda n: 'b5' in n)
            if alternate is not None:
                return switch(best, alternate)
            return best.renamed(replace_first(name, '#11', 'b5'))
    return best

def refine_flat13(best, matches):
    """interval 8 above the root, with a perfect 5th and a 7th present,
    is a b13 tension rather than a #5"""
    if '#5' in best.name and 'aug' not in best.name:
        alternate = find_alternate(matches, best, lambda n: 'b13' in n)
        if alternate is not None:
            return switch(best, alternate)
    return best


def refine_match(best, matches, actual_intervals, unique_pcs):
    """accepts the best-scoring Match, the full ranked list of matches,
    the actual intervals of the played notes above best's root,
    and the sorted unique pitch classes played.
    returns the refined best Match: either best itself, a renamed copy of it,
    or another match from the list on the same root."""
    # chord context relative to the initially chosen root:
    intervals = {(pc - best.root) % 12 for pc in unique_pcs}
    has_maj3, has_min3 = (4 in intervals), (3 in intervals)
    has_7th = (10 in intervals) or (11 in intervals)
    has_tritone = (6 in intervals)
    has_perfect5 = (7 in intervals)
    has_pc8 = (8 in intervals)

    tensions = disambiguate_tensions(actual_intervals, best.root,
                                     has_maj3, has_min3, has_7th, has_perfect5)

    if has_min3 and has_maj3:
        best = refine_sharp9(best, matches, tensions.interval3_is_sharp9)
    if has_tritone:
        best = refine_sharp11(best, matches, tensions.interval6_is_sharp11, has_perfect5)
    if has_pc8 and has_perfect5 and has_7th:
        best = refine_flat13(best, matches)
    return best
