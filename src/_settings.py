
############# debug settings:

### VERBOSE switches on the detailed log output of util.log by default,
### which traces candidate generation and every rename/switch made while
### refining the best chord match. it can also be toggled at runtime with:
### chordsense.util.log.verbose = True
VERBOSE = False


############# scoring settings:

### every candidate match is scored from its pattern's priority, scaled up
### by PRIORITY_SCALE. an exact match (played pitch classes equal the pattern)
### receives EXACT_MATCH_BONUS on top, so that it beats any superset match
### of a higher-priority pattern.
PRIORITY_SCALE = 100
EXACT_MATCH_BONUS = 1000

### patterns flagged allow_omit_5th may match without their perfect fifth,
### at this small cost:
OMIT_5TH_PENALTY = 15

### rootless voicings (where the root is absent and only implied) score on
### a lower scale, and lower still if the fifth is missing too:
ROOTLESS_PRIORITY_SCALE = 80
ROOTLESS_PENALTY = 50
ROOTLESS_OMIT_5TH_PRIORITY_SCALE = 70
ROOTLESS_OMIT_5TH_PENALTY = 80

### played notes that are not part of a pattern are penalised, but less so
### when they are common chord extensions (9th, 11th, 13th i.e. intervals 2, 5, 9),
### and least of all when the pattern already contains some kind of 7th:
COMMON_EXTENSIONS = {2, 5, 9}
EXTENSION_PENALTY_WITH_7TH = 3
EXTENSION_PENALTY = 6
NON_EXTENSION_PENALTY = 18

### during refinement, the engine may switch from the best match to another
### candidate on the same root, but only one that scored within this margin:
ALTERNATE_SCORE_TOLERANCE = 150


############# tension settings:

### notes voiced at or above these compound intervals (in semitones above the
### root's lowest instance) are heard as upper tensions rather than chord tones:
### 14+ semitones for pitch class 3 means #9 rather than b3,
### 17+ semitones for pitch class 6 means #11 rather than b5,
### 19+ semitones for pitch class 8 means b13 rather than #5.
SHARP_9_THRESHOLD = 14
SHARP_11_THRESHOLD = 17
FLAT_13_THRESHOLD = 19


############# display settings:

# chordsense objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { # class markers used to identify object types:
          'ChordAnalysis': '♬ ',
                  'Match': '♫ ',
              'ToneLabel': '♪',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'Intervals': ['𝄁', ' 𝄁'],
                 'Notes': ['𝄃', ' 𝄂'],
               'Pattern': ['~', '~'],
            }

### CHARACTERS are miscellaneous symbols used in tables and summaries:
CHARACTERS = {'exact': '✓',
           'rootless': '∅',
                'bass': '/',
            }
