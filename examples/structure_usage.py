"""
Structure Client Usage Examples.

Demonstrates RCSB, PDBe and Amber GeoStd lookups, and a BLAST search.
"""

import asyncio

from bio_apis import AmberGeostdClient, BlastClient, PdbeClient, RcsbClient
from bio_apis.ncbi import BlastStatus


async def example_rcsb_metadata():
    """Fetch entry metadata and the mmCIF file."""
    async with RcsbClient() as client:
        meta = await client.load_metadata("1ba3")

        print(f"{meta.rcsb_id}: {meta.title}")
        print(f"  Method: {meta.experimental_method}")
        print(f"  Resolution: {meta.resolution} Å")
        print(f"  Chains: {meta.chain_count}")

        cif = await client.load_cif("1ba3")
        print(f"  mmCIF: {len(cif)} characters")

        files = await client.get_files_available("1ba3")
        print(f"  Files: {files.model_dump()}")


async def example_rcsb_sequence_search():
    async with RcsbClient() as client:
        results = await client.search_by_sequence(
            "MEDAKNIKKGPAPFYPLEDGTAGEQLHKAMKRYALVPGTIAFTDAHIEVDITYAEYFEMSVRLAEAMKRYGLNTNHRIVVCSENSLQFFMPVLGALFIGVAVAPANDIYNERELLNSMGISQPTVVFVSKKGLQKILNVQKKLPIIQKIIIMDSKTDYQGFQSMYTFVTSHLPPGFNEYDFVPESFDRDKTIALIMNSSGSTGLPKGVALPHRTACVRFSHARDPIFGNQIIPDTAILSVVPFHHGFGMFTTLGYLICGFRVVLMYRFEEELFLRSLQDYKIQSALLVPTLFSFFAKSTLIDKYDLSNLHEIASGGAPLSKEVGEAVAKRFHLPGIRQGYGLTETTSAILITPEGDDKPGAVGKVVPFFEAKVVDLDTGKTLGVNQRGELCVRGPMIMSGYVNNPEATNALIDKDGWLHSGDIAYWDEDEHFFIVDRLKSLIKYKGYQVAPAELESILLQHPNIFDAGVAGLPDDDAGELPAAVVVLEHGKTMTEKEIVDYVASQVTTAKKLRGGVVFVDEVPKGLTGKLDARKIREILIKAKKGGKIAV",
            identity_cutoff=0.9,
        )

        for hit in results.result_set:
            print(f"  {hit.identifier} (score {hit.score:.2f})")


async def example_pdbe_ligand():
    async with PdbeClient() as client:
        atp = await client.get_compound_summary("ATP")
        print(f"{atp.ccd_id}: {atp.name} ({atp.formula}, {atp.weight})")

        sdf = await client.load_sdf("ATP")
        print(f"  Ideal SDF: {len(sdf.splitlines())} lines")


async def example_amber_geostd():
    async with AmberGeostdClient() as client:
        items = await client.find_mols("CPB")
        for item in items[:5]:
            print(f"  {item.ident}: frcmod={item.frcmod_avail}, lib={item.lib_avail}")

        if items:
            files = await client.load_mol_files(items[0].ident)
            print(f"  Mol2: {len(files.mol2.splitlines())} lines")


async def example_blast():
    """Submit a BLAST search and poll until it finishes."""
    async with BlastClient() as client:
        job = await client.submit("MKTAYIAKQRQISFVKSHFSRQLEERLGLIEVQAPILSRVGDGTQDNLSGAEKAVQVKVKALPDAQFEVVHSLAKWKRQTLGQHDFSAGEGLYTHMKALRPDEDRLSPLHSVYVDQWDWERVMGDGERQFSTLKSTVEAIWAGIKATEAAVSEEFGLAPFLPDQIHFVHSQELLSRYPDLDAKGRERAIAKDLGAVFLVGIGGKLSDGHRHDVRAPDYDDWSTPSELGHAGLNGDILVWNPVLEDAFELSSMGIRVDADTLKHQLALTGDEDRLELEWHQALLRGEMPQTIGGGIGQSRLTMLLLQLPHIGQVQAGVWPAACRESVPALL")
        print(f"RID {job.rid}, estimated {job.estimated_seconds}s")

        await asyncio.sleep(job.estimated_seconds or 60)
        result = await client.poll(job.rid)
        while result.status is BlastStatus.RUNNING:
            await asyncio.sleep(60)
            result = await client.poll(job.rid)

        print(f"Status: {result.status.value}")
        if result.payload:
            print(result.payload[:500])


async def main():
    print("=" * 60)
    print("Structure Client Examples")
    print("=" * 60)

    print("\n1. RCSB Metadata")
    print("-" * 40)
    await example_rcsb_metadata()

    print("\n2. RCSB Sequence Search")
    print("-" * 40)
    await example_rcsb_sequence_search()

    print("\n3. PDBe Ligand")
    print("-" * 40)
    await example_pdbe_ligand()

    print("\n4. Amber GeoStd")
    print("-" * 40)
    await example_amber_geostd()

    print("\n5. BLAST (takes a few minutes)")
    print("-" * 40)
    await example_blast()

    print("\n" + "=" * 60)
    print("Examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
