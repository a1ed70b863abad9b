# %% [markdown]
# # fuzzyrank quickstart
#
# Edit distance, closest matches and similarity sorting in a few lines.
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distance |
# | 2 | Closest matches |
# | 3 | Options and custom metrics |
# | 4 | Polars |
# | 5 | Case conversion |

# %%
import polars as pl

import fuzzyrank as fz

# %% [markdown]
# ## Part 1: Edit distance

# %%
print(fz.levenshtein_distance("kitten", "sitting"))  # 3
print(fz.levenshtein_similarity("hello", "hallo"))  # 0.8

# %% [markdown]
# ## Part 2: Closest matches
#
# Matching is case-insensitive by default. Ties go to the earliest candidate.

# %%
commands = ["length", "size", "help", "world"]
print(fz.closest_string("hep", commands))  # help
print(fz.closest_strings("hep", commands, 2))  # ['help', 'size']
print(fz.sort_by_similarity(commands, "hep"))

try:
    fz.closest_string("hep", [])
except fz.StringMatchingError as exc:
    print(f"error: {exc.message}")

# Distances are available through rank()
for match in fz.rank("hep", commands, limit=3):
    print(f"{match.text:>8}  distance={match.distance}  index={match.index}")

# %% [markdown]
# ## Part 3: Options and custom metrics

# %%
strict = fz.case_sensitive_closest_string_options()
print(fz.closest_string("help", ["HELP", "Help"], strict))  # Help


def length_gap(a: str, b: str) -> int:
    return abs(len(a) - len(b))


by_length = fz.MatchingOptions(compare_fn=length_gap)
print(fz.sort_by_similarity(["aaaa", "a", "aaa"], "aa", by_length))

# %% [markdown]
# ## Part 4: Polars

# %%
df = pl.DataFrame({"raw": ["Jhon", "Jane", "jon", None]})
print(
    df.with_columns(
        fixed=pl.col("raw").fuzzy.closest(["John", "Jane"]),
        dist=pl.col("raw").fuzzy.distance("John"),
    )
)
print(fz.match_series(pl.Series(["helo", "wrld"]), pl.Series(["hello", "world", "help"]), n=2))

# %% [markdown]
# ## Part 5: Case conversion

# %%
print(fz.to_snake_case("parseHTTPResponse"))  # parse_http_response
print(fz.convert_case("user account id", "camel"))  # userAccountId
print(fz.suggest_case_style("user-id"))  # CaseStyle.KEBAB
